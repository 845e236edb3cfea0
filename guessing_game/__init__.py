"""
Guess the number: a small console game.
"""

__version__ = "1.0.0"
