"""
Anilist - Remote account integration entry points.
"""

from mangal.anilist.client import AnilistClient

__all__ = ["AnilistClient"]
