"""Small interactive console programs: calculator, grading, word count, guessing game and movie booking."""

__version__ = "0.1.0"
__all__ = ["calculator", "grading", "wordcount", "guessing", "moviebooking"]