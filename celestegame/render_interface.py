"""Batched sprite transforms handed to the renderer each frame."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .assets import SpriteID, get_sprite
from .vectors import IVec2, Vec2

MAX_TRANSFORMS = 1000
TRANSFORM_FORMAT = "=4i4f"
TRANSFORM_SIZE = struct.calcsize(TRANSFORM_FORMAT)


@dataclass(frozen=True)
class Transform:
    """One sprite instance: atlas region plus screen position and size."""

    atlas_offset: IVec2 = field(default_factory=IVec2)
    sprite_size: IVec2 = field(default_factory=IVec2)
    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)

    def pack(self) -> bytes:
        """Binary layout as uploaded to the GPU storage buffer."""
        return struct.pack(
            TRANSFORM_FORMAT,
            *self.atlas_offset,
            *self.sprite_size,
            *self.pos,
            *self.size,
        )


@dataclass
class RenderData:
    """Transforms queued for the next frame, at most MAX_TRANSFORMS."""

    transforms: list[Transform] = field(default_factory=list)

    @property
    def transform_count(self) -> int:
        return len(self.transforms)

    def draw_sprite(self, sprite_id: SpriteID, pos: Vec2, size: Vec2) -> Transform:
        """Queue a sprite at *pos* with on-screen *size*."""
        if len(self.transforms) >= MAX_TRANSFORMS:
            raise IndexError(f"cannot queue more than {MAX_TRANSFORMS} transforms")
        sprite = get_sprite(sprite_id)
        transform = Transform(
            atlas_offset=sprite.atlas_offset,
            sprite_size=sprite.sprite_size,
            pos=pos,
            size=size,
        )
        self.transforms.append(transform)
        return transform

    def to_bytes(self) -> bytes:
        """Packed queued transforms, in queue order."""
        return b"".join(t.pack() for t in self.transforms)

    def clear(self) -> None:
        """Drop every queued transform."""
        self.transforms.clear()


render_data = RenderData()


def draw_sprite(sprite_id: SpriteID, pos: Vec2, size: Vec2) -> Transform:
    """Queue a sprite on the shared render data."""
    return render_data.draw_sprite(sprite_id, pos, size)