"""show-colors — ANSI colour reference tables for the current terminal."""

__version__ = '1.0.0'
