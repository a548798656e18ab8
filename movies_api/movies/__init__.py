"""
Movies package for the movie ratings API.

Holds the ``Movie`` schemas, the in-memory ``MovieStore`` and the routes
that expose it. The store lives only as long as the process; to add
durability, put a backend behind the ``MovieStore`` interface without
changing the routes.
"""

from .router import router as movies_router  # noqa: F401
