"""Small algorithm exercises: bounds, tic-tac-toe, arrays, strings, sorting, phrases, weather and player rankings."""

__version__ = "0.1.0"