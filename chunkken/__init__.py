"""Data tables, input buffering, combo recognition, frame counting and camera framing for a two-player fighting game."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "csvutil",
    "frames",
    "game_data",
    "input_manager",
    "input_table",
    "move_combos",
    "moves",
    "records",
    "state_tables",
    "tables",
]