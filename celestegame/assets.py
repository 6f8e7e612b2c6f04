"""Sprite identifiers and their locations in the texture atlas."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .logger import AssertionFailedError, check
from .vectors import IVec2


class SpriteID(enum.IntEnum):
    """Known sprites."""

    DICE = 0
    COUNT = 1


@dataclass(frozen=True)
class Sprite:
    """A sprite's offset and size in the atlas, in pixels."""

    atlas_offset: IVec2 = field(default_factory=IVec2)
    sprite_size: IVec2 = field(default_factory=IVec2)


_NAMES = {SpriteID.DICE: "DICE", SpriteID.COUNT: "COUNT"}

_SPRITES = {
    SpriteID.DICE: Sprite(atlas_offset=IVec2(16, 0), sprite_size=IVec2(16, 16)),
}


def sprite_id_to_string(sprite_id) -> str:
    """Name of a sprite id, or a marker string for unknown ids."""
    return _NAMES.get(sprite_id, "INVALID SPRITE TYPE")


def get_sprite(sprite_id) -> Sprite:
    """Atlas placement of a sprite; raises AssertionFailedError if unknown."""
    sprite = _SPRITES.get(sprite_id)
    check(sprite is not None, "INVALID SPRITE ID: {}", sprite_id_to_string(sprite_id))
    if sprite is None:
        raise AssertionFailedError("INVALID SPRITE ID")
    return sprite