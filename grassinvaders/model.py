"""Game state: the ship, the alien and the rules that move them."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Tuple

SCREEN_W = 960 // 2
SCREEN_H = 540 // 2
GRASS_H = 60

SHIP_W = 100
SHIP_H = 50

ALIEN_W = 50
ALIEN_H = 25

FPS = 100.0

Color = Tuple[int, int, int]


class Key(enum.Enum):
    """Keys the game reacts to."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Ship:
    """The player's ship, moving along the bottom of the screen."""

    x: float = float(SCREEN_W // 2)
    vel: int = 1
    right: bool = False
    left: bool = False
    color: Color = (0, 0, 255)

    def update(self) -> None:
        """Move the ship according to the held keys, staying on screen."""
        if self.right and self.x + self.vel <= SCREEN_W:
            self.x += self.vel
        if self.left and self.x - self.vel >= 0:
            self.x -= self.vel


@dataclass
class Alien:
    """An alien sweeping sideways and stepping down at each wall."""

    x: float = 0.0
    y: float = 0.0
    x_vel: float = 1.0
    y_vel: float = float(ALIEN_H)
    color: Color = (255, 255, 255)

    def update(self) -> None:
        """Advance one tick, bouncing and descending at the screen edges."""
        if self.x + ALIEN_W + self.x_vel > SCREEN_W or self.x + self.x_vel < 0:
            self.y += self.y_vel
            self.x_vel = -self.x_vel
        self.x += self.x_vel

    def touches_ground(self) -> bool:
        """Whether the alien has reached the grass."""
        return self.y + ALIEN_H >= SCREEN_H - GRASS_H


def random_alien(rng: random.Random) -> Alien:
    """Create an alien in its starting place with a random colour."""
    return Alien(color=(rng.randrange(256), rng.randrange(256), rng.randrange(256)))


@dataclass
class World:
    """The whole game state advanced one tick at a time."""

    ship: Ship = field(default_factory=Ship)
    alien: Alien = field(default_factory=lambda: random_alien(random.Random()))
    playing: bool = True
    ticks: int = 0

    def press(self, key: Key) -> None:
        """Start moving in the key's direction."""
        if key is Key.LEFT:
            self.ship.left = True
        elif key is Key.RIGHT:
            self.ship.right = True

    def release(self, key: Key) -> None:
        """Stop moving in the key's direction."""
        if key is Key.LEFT:
            self.ship.left = False
        elif key is Key.RIGHT:
            self.ship.right = False

    def step(self) -> bool:
        """Advance one tick; return whether the game goes on."""
        self.ship.update()
        self.alien.update()
        self.playing = not self.alien.touches_ground()
        self.ticks += 1
        return self.playing