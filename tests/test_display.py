import pytest

from grassinvaders.display import (
    WINDOW_TITLE_MAX_SIZE,
    DisplayOption,
    DisplaySettings,
    Importance,
    MonitorInfo,
    Orientation,
)


def test_orientation_option_round_trip():
    settings = DisplaySettings()
    settings.set_option(DisplayOption.SUPPORTED_ORIENTATIONS, Orientation.PORTRAIT, Importance.REQUIRE)
    value, importance = settings.get_option(DisplayOption.SUPPORTED_ORIENTATIONS)
    assert value == Orientation.DEG_0 | Orientation.DEG_180
    assert importance is Importance.REQUIRE


def test_monitor_size():
    info = MonitorInfo(100, 50, 300, 250)
    assert info.width() == 200
    assert info.height() == 200


def test_monitor_contains_edges():
    info = MonitorInfo(0, 0, 640, 480)
    assert info.contains(0, 0)
    assert info.contains(639, 479)
    assert not info.contains(640, 0)
    assert not info.contains(0, 480)
    assert not info.contains(-1, 10)


def test_option_round_trip():
    settings = DisplaySettings()
    settings.set_option(DisplayOption.VSYNC, 1, Importance.REQUIRE)
    assert settings.get_option(DisplayOption.VSYNC) == (1, Importance.REQUIRE)


def test_unset_option_is_dontcare():
    settings = DisplaySettings()
    assert settings.get_option(DisplayOption.SAMPLES) == (0, Importance.DONTCARE)


def test_dontcare_forgets_option():
    settings = DisplaySettings()
    settings.set_option(DisplayOption.DEPTH_SIZE, 24, Importance.SUGGEST)
    settings.set_option(DisplayOption.DEPTH_SIZE, 24, Importance.DONTCARE)
    assert settings.get_option(DisplayOption.DEPTH_SIZE) == (0, Importance.DONTCARE)


def test_reset_clears_all_options():
    settings = DisplaySettings()
    settings.set_option(DisplayOption.RED_SIZE, 8, Importance.SUGGEST)
    settings.set_option(DisplayOption.GREEN_SIZE, 8, Importance.REQUIRE)
    settings.reset()
    assert settings.get_option(DisplayOption.RED_SIZE)[1] is Importance.DONTCARE
    assert settings.get_option(DisplayOption.GREEN_SIZE)[1] is Importance.DONTCARE


def test_invalid_option_rejected():
    settings = DisplaySettings()
    with pytest.raises(ValueError):
        settings.set_option(999, 1, Importance.REQUIRE)


def test_window_title_kept_and_truncated():
    settings = DisplaySettings()
    settings.set_window_title("Grass Invaders")
    assert settings.window_title == "Grass Invaders"
    settings.set_window_title("x" * (WINDOW_TITLE_MAX_SIZE + 40))
    assert len(settings.window_title) == WINDOW_TITLE_MAX_SIZE