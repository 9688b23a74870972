"""Caesar Shift Game - guess the hidden shift used to encrypt a word."""

__version__ = "0.1.0"
