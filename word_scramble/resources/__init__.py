"""Data files bundled with the game."""
