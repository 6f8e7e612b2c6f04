"""Game window, main loop and program entry point."""

from __future__ import annotations

import argparse
import os
from typing import Optional

from .assets import SpriteID
from .bump_allocator import BumpAllocator
from .input import InputState, input_state as shared_input_state
from .logger import TextColor, error, log
from .render_interface import RenderData, render_data as shared_render_data
from .renderer import GLRenderer
from .utils import mb
from .vectors import Vec2

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 720
DEFAULT_TITLE = "Celeste"
TRANSIENT_STORAGE_SIZE = mb(50)

_GRID = 10
_TILE = 100.0


def update_game(render_data: RenderData) -> None:
    """Queue one frame of game sprites: a 10 by 10 grid of dice."""
    for x in range(_GRID):
        for y in range(_GRID):
            render_data.draw_sprite(
                SpriteID.DICE, Vec2(x * _TILE, y * _TILE), Vec2(_TILE, _TILE)
            )


class Application:
    """Owns the window, the GL renderer and the frame loop."""

    _instance: Optional["Application"] = None

    def __init__(
        self,
        input_state: Optional[InputState] = None,
        render_data: Optional[RenderData] = None,
        transient_size: int = TRANSIENT_STORAGE_SIZE,
    ) -> None:
        self.input_state = input_state if input_state is not None else shared_input_state
        self.render_data = render_data if render_data is not None else shared_render_data
        self.transient_storage = BumpAllocator(transient_size)
        self.window = None
        self.renderer: Optional[GLRenderer] = None
        self.running = False
        try:
            log("TRACE: ", TextColor.GREEN, "Current working directory: {}", os.getcwd())
        except OSError as exc:
            error("Failed to get current_path: {}", exc)

    @staticmethod
    def get() -> "Application":
        """The process-wide application instance, created on first use."""
        if Application._instance is None:
            Application._instance = Application()
        return Application._instance

    def init(self, width: int, height: int, title: str) -> bool:
        """Open a window with an OpenGL 4.3 core debug context; False on failure."""
        import pyglet
        from pyglet import gl

        config = gl.Config(
            double_buffer=True,
            red_size=8,
            green_size=8,
            blue_size=8,
            alpha_size=8,
            depth_size=24,
            major_version=4,
            minor_version=3,
            forward_compatible=True,
            debug=True,
        )
        try:
            window = pyglet.window.Window(
                width=width,
                height=height,
                caption=title,
                resizable=True,
                config=config,
                visible=False,
            )
        except (pyglet.window.WindowException, gl.ContextException, OSError) as exc:
            error("Failed to create OpenGL window: {}", exc)
            return False

        self.window = window
        window.push_handlers(on_close=self.on_close, on_resize=self.on_resize)
        self.input_state.resize(window.width, window.height)

        window.set_visible(True)
        self.running = True

        self.renderer = GLRenderer(self.render_data, self.input_state)
        self.renderer.init(self.transient_storage)
        return True

    def _process_messages(self) -> None:
        self.window.dispatch_events()

    def run(self) -> None:
        """Pump events, queue sprites, render and swap until the window closes."""
        if self.window is None or self.renderer is None:
            raise RuntimeError("init() must succeed before run()")
        while self.running:
            self._process_messages()
            update_game(self.render_data)
            self.renderer.render()
            self.window.flip()

    def shutdown(self) -> None:
        """Stop the loop, close the window and release transient memory."""
        self.running = False
        if self.window is not None:
            self.window.close()
            self.window = None
        self.renderer = None
        self.transient_storage.reset()

    def on_close(self) -> bool:
        """Window close request: end the main loop and keep the window alive."""
        self.running = False
        return True

    def on_resize(self, width: int, height: int) -> None:
        """Record the new client-area size for the renderer."""
        self.input_state.resize(width, height)


def main(argv=None) -> int:
    """Start the game in a default-sized window."""
    parser = argparse.ArgumentParser(prog="celestegame", description="Run the game.")
    parser.parse_args(argv)

    app = Application.get()
    app.input_state.resize(DEFAULT_WIDTH, DEFAULT_HEIGHT)
    if not app.init(
        app.input_state.screen_size_x, app.input_state.screen_size_y, DEFAULT_TITLE
    ):
        return 1
    try:
        app.run()
    finally:
        app.shutdown()
    return 0