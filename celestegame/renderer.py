"""OpenGL sprite renderer drawing the queued transforms as instanced quads."""

from __future__ import annotations

import io
import os
from typing import Optional

from .bump_allocator import BumpAllocator
from .files import get_file_size, read_file
from .input import InputState
from .logger import TextColor, check, log
from .render_interface import MAX_TRANSFORMS, TRANSFORM_SIZE, RenderData

GL_DEBUG_SEVERITY_HIGH = 0x9146
GL_DEBUG_SEVERITY_MEDIUM = 0x9147
GL_DEBUG_SEVERITY_LOW = 0x9148
GL_DEBUG_SEVERITY_NOTIFICATION = 0x826B

_GL_MULTISAMPLE = 0x809D

VERT_SHADER_PATH = os.path.join("assets", "shaders", "quad.vert")
FRAG_SHADER_PATH = os.path.join("assets", "shaders", "quad.frag")
TEXTURE_ATLAS_PATH = os.path.join("assets", "textures", "TEXTURE_ATLAS.png")

CLEAR_COLOR = (119.0 / 255.0, 33.0 / 255.0, 111.0 / 255.0, 1.0)

_ERROR_SEVERITIES = frozenset(
    {GL_DEBUG_SEVERITY_LOW, GL_DEBUG_SEVERITY_MEDIUM, GL_DEBUG_SEVERITY_HIGH}
)


def _trace_msg(fmt: str, *args) -> None:
    log("TRACE: ", TextColor.GREEN, fmt, *args)


def _gl():
    from pyglet import gl

    return gl


def handle_debug_message(severity: int, message: str) -> None:
    """Raise on GL errors of any real severity; trace notifications."""
    if severity in _ERROR_SEVERITIES:
        check(False, "OpenGL Error: {}", message)
    else:
        _trace_msg("{}", message)


def read_shader_sources(
    transient_storage: BumpAllocator, vert_path, frag_path
) -> tuple[str, str]:
    """Read both shader files through *transient_storage* and return their text."""
    sizes = []
    for path in (vert_path, frag_path):
        size = get_file_size(path)
        if size is None:
            raise FileNotFoundError(f"cannot determine size of {os.fspath(path)}")
        sizes.append(size)

    vert_mem = transient_storage.alloc(sizes[0] + 1)
    frag_mem = transient_storage.alloc(sizes[1] + 1)

    vert_result = read_file(vert_path, vert_mem)
    frag_result = read_file(frag_path, frag_mem)

    check(
        vert_result is not None and frag_result is not None,
        "Failed to load shaders: vert: {} frag: {}",
        "Success" if vert_result is not None else "Fail",
        "Success" if frag_result is not None else "Fail",
    )
    return (
        bytes(vert_result).decode("utf-8"),
        bytes(frag_result).decode("utf-8"),
    )


def compile_shader(shader_id: str, source: str, shader_name: str):
    """Compile *source* as the shader stage *shader_id* ("vertex" or "fragment").

    Returns the compiled shader; raises with the compile log on failure.
    """
    from pyglet.graphics.shader import Shader, ShaderException

    try:
        shader = Shader(source, shader_id)
    except ShaderException as exc:
        check(False, "Failed to compile {} Shader: {}", shader_name, exc)
    _trace_msg("Shader Compiled: {}", shader_name)
    return shader


class GLRenderer:
    """Owns the GL objects used to draw the queued sprite transforms."""

    def __init__(self, render_data: RenderData, input_state: InputState) -> None:
        self.render_data = render_data
        self.input_state = input_state
        self.program_id = 0
        self.texture_id = 0
        self.transform_sbo_id = 0
        self.screen_size_id = 0
        self.quad_vao = 0
        self.initialized = False
        self._debug_callback = None
        self._program = None

    def load_texture(self, path) -> bool:
        """Decode an image file and upload it as the atlas texture."""
        path_string = os.fspath(path)
        _trace_msg("Loading Texture: {}", path_string)
        try:
            with open(path, "rb") as file:
                encoded = file.read()
        except OSError:
            encoded = None
        check(encoded is not None, "Faild to load Texture: {}", path_string)

        import pyglet.image
        from pyglet.image.codecs import ImageDecodeException

        try:
            image = pyglet.image.load(path_string, file=io.BytesIO(encoded))
        except (ImageDecodeException, OSError, ValueError):
            image = None
        check(image is not None, "Faild to load Texture: {}", path_string)

        width, height = image.width, image.height
        pixels = image.get_image_data().get_data("RGBA", -width * 4)

        gl = _gl()
        pixel_buffer = (gl.GLubyte * len(pixels)).from_buffer_copy(pixels)
        texture = gl.GLuint()
        gl.glGenTextures(1, texture)
        self.texture_id = texture.value
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture_id)

        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl.GL_SRGB8_ALPHA8, width, height, 0,
            gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixel_buffer,
        )
        _trace_msg("Texture Loaded: {}", path_string)
        return True

    def _install_debug_callback(self, gl) -> None:
        def callback(source, kind, ident, severity, length, message, user):
            if not message or length <= 0:
                return
            raw = message[:length]
            handle_debug_message(severity, raw.decode("utf-8", "replace"))

        self._debug_callback = gl.GLDEBUGPROC(callback)
        gl.glDebugMessageCallback(self._debug_callback, None)
        gl.glEnable(gl.GL_DEBUG_OUTPUT_SYNCHRONOUS)
        gl.glEnable(gl.GL_DEBUG_OUTPUT)

    def init(self, transient_storage: BumpAllocator) -> bool:
        """Build the shader program, VAO, atlas texture and transform buffer."""
        vert_source, frag_source = read_shader_sources(
            transient_storage, VERT_SHADER_PATH, FRAG_SHADER_PATH
        )

        gl = _gl()
        from pyglet.graphics.shader import ShaderProgram

        self._install_debug_callback(gl)

        vert_shader = compile_shader("vertex", vert_source, "QuadVertex")
        frag_shader = compile_shader("fragment", frag_source, "QuadFragment")

        self._program = ShaderProgram(vert_shader, frag_shader)
        self.program_id = self._program.id

        vao = gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        self.quad_vao = vao.value
        gl.glBindVertexArray(self.quad_vao)

        self.load_texture(TEXTURE_ATLAS_PATH)

        sbo = gl.GLuint()
        gl.glGenBuffers(1, sbo)
        self.transform_sbo_id = sbo.value
        gl.glBindBufferBase(gl.GL_SHADER_STORAGE_BUFFER, 0, self.transform_sbo_id)
        capacity = TRANSFORM_SIZE * MAX_TRANSFORMS
        queued = self.render_data.to_bytes()
        initial = (gl.GLubyte * capacity).from_buffer_copy(queued.ljust(capacity, b"\0"))
        gl.glBufferData(gl.GL_SHADER_STORAGE_BUFFER, capacity, initial, gl.GL_DYNAMIC_DRAW)

        name = b"screenSize\0"
        self.screen_size_id = gl.glGetUniformLocation(
            self.program_id, (gl.GLchar * len(name)).from_buffer_copy(name)
        )

        gl.glEnable(gl.GL_FRAMEBUFFER_SRGB)
        gl.glDisable(_GL_MULTISAMPLE)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glDepthFunc(gl.GL_GREATER)

        gl.glUseProgram(self.program_id)
        self.initialized = True
        return True

    def render(self) -> None:
        """Draw and then drop every queued transform."""
        if not self.initialized:
            raise RuntimeError("renderer used before init()")
        gl = _gl()
        width = self.input_state.screen_size_x
        height = self.input_state.screen_size_y

        gl.glClearColor(*CLEAR_COLOR)
        gl.glClearDepth(0.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glViewport(0, 0, width, height)

        screen_size = (gl.GLfloat * 2)(float(width), float(height))
        gl.glUniform2fv(self.screen_size_id, 1, screen_size)

        data = self.render_data.to_bytes()
        if data:
            upload = (gl.GLubyte * len(data)).from_buffer_copy(data)
            gl.glBufferSubData(gl.GL_SHADER_STORAGE_BUFFER, 0, len(data), upload)
        gl.glDrawArraysInstanced(gl.GL_TRIANGLES, 0, 6, self.render_data.transform_count)
        self.render_data.clear()

        gl.glBindVertexArray(self.quad_vao)

    @property
    def debug_callback(self) -> Optional[object]:
        """The installed GL debug callback, kept alive while the renderer lives."""
        return self._debug_callback