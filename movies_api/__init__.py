"""In-memory movie catalogue with user ratings, served over FastAPI."""

__version__ = "1.0.0"
