"""FitGenius core - guided workout sessions and progress tracking."""

__version__ = "0.1.0"
