"""Window input state shared with the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputState:
    """Current screen size as reported by the window."""

    screen_size_x: int = 0
    screen_size_y: int = 0

    def resize(self, width: int, height: int) -> None:
        """Record a new client-area size."""
        self.screen_size_x = width
        self.screen_size_y = height


input_state = InputState()