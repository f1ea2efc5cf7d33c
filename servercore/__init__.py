"""Shared server utilities: timers, intrusive lists, byte dumps, progress bars and text helpers."""

__version__ = "22.1.1"