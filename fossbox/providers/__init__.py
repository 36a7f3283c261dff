"""Content provider implementations.

This module contains concrete implementations of the ContentProvider protocol
defined in fossbox/core/providers.py.
"""

from fossbox.providers.tmdb_provider import TmdbProvider
from fossbox.providers.tmdb_schemas import TmdbListResponse, TmdbResult

__all__ = [
    "TmdbListResponse",
    "TmdbProvider",
    "TmdbResult",
]
