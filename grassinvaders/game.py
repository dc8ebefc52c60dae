"""Drawing and the main loop of the game window."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from grassinvaders.model import (
    ALIEN_H,
    ALIEN_W,
    FPS,
    GRASS_H,
    SCREEN_H,
    SCREEN_W,
    SHIP_H,
    SHIP_W,
    Alien,
    Key,
    Ship,
    World,
)

BACKGROUND = (0, 0, 0)
GRASS = (0, 255, 0)
SHIP_BASE_Y = SCREEN_H - GRASS_H // 2

_KEYS = {pygame.K_a: Key.LEFT, pygame.K_d: Key.RIGHT}


def draw_scenario(surface: pygame.Surface) -> None:
    """Paint the black sky and the strip of grass."""
    surface.fill(BACKGROUND)
    pygame.draw.rect(surface, GRASS, pygame.Rect(0, SCREEN_H - GRASS_H, SCREEN_W, GRASS_H))


def draw_ship(surface: pygame.Surface, ship: Ship) -> None:
    """Draw the ship as a filled triangle standing on the grass."""
    half = SHIP_W // 2
    points = [
        (ship.x, SHIP_BASE_Y - SHIP_H),
        (ship.x - half, SHIP_BASE_Y),
        (ship.x + half, SHIP_BASE_Y),
    ]
    pygame.draw.polygon(surface, ship.color, points)


def draw_alien(surface: pygame.Surface, alien: Alien) -> None:
    """Draw the alien as a filled rectangle."""
    pygame.draw.rect(surface, alien.color, pygame.Rect(int(alien.x), int(alien.y), ALIEN_W, ALIEN_H))


def render(surface: pygame.Surface, world: World) -> None:
    """Draw the whole scene."""
    draw_scenario(surface)
    draw_ship(surface, world.ship)
    draw_alien(surface, world.alien)


def key_from_pygame(keycode: int) -> Optional[Key]:
    """Map a pygame key code to a game key, or None if it is not used."""
    return _KEYS.get(keycode)


def run(fps: float = FPS) -> int:
    """Open the window and play until the alien lands or the window closes."""
    frames_per_second = max(1, int(fps))
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("Grass Invaders")
        clock = pygame.time.Clock()
        world = World()
        while world.playing:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    world.playing = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    print(f"key code: {event.key}")
                    key = key_from_pygame(event.key)
                    if key is not None:
                        if event.type == pygame.KEYDOWN:
                            world.press(key)
                        else:
                            world.release(key)
            if not world.playing:
                break
            world.step()
            render(screen, world)
            pygame.display.flip()
            if world.ticks % frames_per_second == 0:
                print(f"{int(world.ticks / fps)} seconds have passed...")
            clock.tick(fps)
        return world.ticks
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="grassinvaders", description="Stop the alien before it lands.")
    parser.add_argument("--fps", type=float, default=FPS, help="frames per second")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    run(args.fps)
    return 0