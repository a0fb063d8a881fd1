"""Game logic for a top-down dungeon arcade game: engine primitives, actors, enemies, power-ups, HUD, menu and Tiled map loading."""

__version__ = "0.1.0"