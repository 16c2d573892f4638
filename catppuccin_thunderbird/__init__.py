"""Catppuccin theme package builder for Thunderbird."""

__version__ = "1.0.0"
