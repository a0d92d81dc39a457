"""
Sources - Configured manga source adapters and their resolution.
"""

from mangal.sources.base import SourceAdapter
from mangal.sources.registry import resolve_sources

__all__ = [
    "SourceAdapter",
    "resolve_sources",
]
