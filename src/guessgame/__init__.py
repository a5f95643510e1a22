"""Guess game: category trivia with progressively revealed hints."""

__version__ = "0.1.0"
