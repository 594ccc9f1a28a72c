"""Advent of Code puzzle solutions and a small day-management command."""

__version__ = "0.1.0"