"""A small arcade game where an alien descends towards the grass, with fixed-point, file-type, audio, display and input helpers."""

__version__ = "0.1.0"
__all__ = ["audio", "display", "fixed", "game", "inputs", "model", "registry"]