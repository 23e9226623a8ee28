"""Player state and movement for the side-scrolling game."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["Joystick", "Player"]


@dataclass
class Joystick:
    """Which of the player's controls are held down."""

    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False
    run: bool = False


@dataclass
class Player:
    """A player's position, hitbox, speed, life and controls."""

    x: float = 30.0
    y: float = 220.0
    width: float = 0.0
    height: float = 0.0
    vel: float = 2.0
    life: int = 10
    joystick: Joystick = field(default_factory=Joystick)

    def move(self, keys: Iterable[str], y_limit: float) -> None:
        """Move by the held W/A/S/D keys; moving down stops at ``y_limit``."""
        held = {key.lower() for key in keys}
        if "w" in held:
            self.y -= self.vel
        if "a" in held:
            self.x -= self.vel
        if "s" in held and self.y < y_limit:
            self.y += self.vel
        if "d" in held:
            self.x += self.vel

    def apply_joystick(self, y_limit: float) -> None:
        """Move by the joystick's direction buttons; moving down stops at ``y_limit``."""
        if self.joystick.right:
            self.x += self.vel
        if self.joystick.left:
            self.x -= self.vel
        if self.joystick.up:
            self.y -= self.vel
        if self.joystick.down and self.y < y_limit:
            self.y += self.vel