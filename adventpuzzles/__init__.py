"""Solutions to daily programming puzzles from the 2023, 2024 and 2025 seasons."""

__version__ = "0.1.0"