import random

from grassinvaders.model import (
    ALIEN_H,
    ALIEN_W,
    GRASS_H,
    SCREEN_H,
    SCREEN_W,
    Alien,
    Key,
    Ship,
    World,
    random_alien,
)


def test_ship_starts_centered():
    assert Ship().x == SCREEN_W // 2
    assert Ship().color == (0, 0, 255)


def test_ship_moves_right_and_left():
    ship = Ship(right=True)
    start = ship.x
    ship.update()
    assert ship.x == start + ship.vel
    ship.right, ship.left = False, True
    ship.update()
    assert ship.x == start


def test_ship_both_keys_cancel():
    ship = Ship(right=True, left=True)
    start = ship.x
    ship.update()
    assert ship.x == start


def test_ship_stays_on_screen():
    ship = Ship(x=float(SCREEN_W), right=True)
    ship.update()
    assert ship.x == SCREEN_W
    ship = Ship(x=0.0, left=True)
    ship.update()
    assert ship.x == 0


def test_alien_moves_right():
    alien = Alien()
    alien.update()
    assert (alien.x, alien.y) == (1.0, 0.0)


def test_alien_bounces_at_right_wall():
    alien = Alien(x=float(SCREEN_W - ALIEN_W))
    alien.update()
    assert alien.y == ALIEN_H
    assert alien.x_vel == -1
    assert alien.x == SCREEN_W - ALIEN_W - 1


def test_alien_bounces_at_left_wall():
    alien = Alien(x=0.0, x_vel=-1.0)
    alien.update()
    assert alien.y == ALIEN_H
    assert alien.x_vel == 1
    assert alien.x == 1


def test_touches_ground_boundary():
    limit = SCREEN_H - GRASS_H - ALIEN_H
    assert Alien(y=float(limit)).touches_ground()
    assert not Alien(y=float(limit - 1)).touches_ground()


def test_random_alien_is_deterministic_for_seed():
    a = random_alien(random.Random(42))
    b = random_alien(random.Random(42))
    assert a == b
    assert all(0 <= c < 256 for c in a.color)
    assert (a.x, a.y) == (0.0, 0.0)


def test_world_keys():
    world = World()
    world.press(Key.LEFT)
    world.press(Key.RIGHT)
    assert world.ship.left and world.ship.right
    world.release(Key.LEFT)
    assert not world.ship.left and world.ship.right
    world.release(Key.RIGHT)
    assert not world.ship.right


def test_world_ends_when_alien_lands():
    world = World(alien=random_alien(random.Random(1)))
    steps = 0
    while world.step():
        steps += 1
        assert steps < 100_000
    assert not world.playing
    assert world.alien.touches_ground()
    assert world.ticks == steps + 1


def test_world_step_moves_ship():
    world = World()
    world.press(Key.RIGHT)
    start = world.ship.x
    assert world.step()
    assert world.ship.x == start + world.ship.vel