"""Map files, save files, tiles, HUD layout and screen logic for the SoupDL platformer."""

__version__ = "0.6.0"