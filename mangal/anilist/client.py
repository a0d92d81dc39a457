"""
Anilist Client - Credentials holder for the Anilist integration.

Only construction is handled here: the OAuth flow and API calls belong to
the remote-account layer, which receives the constructed client.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from mangal.core.exceptions import AnilistError


logger = logging.getLogger(__name__)


TOKEN_FILE_NAME = "anilist_token.json"


class AnilistClient:
    """Anilist API client credentials and cached access token."""

    def __init__(self, client_id: str, client_secret: str, access_token: Optional[str] = None):
        self.id = client_id
        self.secret = client_secret
        self.access_token = access_token

    @property
    def is_authorized(self) -> bool:
        return bool(self.access_token)

    @classmethod
    def create(
        cls,
        client_id: str,
        client_secret: str,
        token_file: Optional[Path] = None,
    ) -> "AnilistClient":
        """
        Construct a client, loading a cached access token if one exists.

        Empty credentials are accepted here and reported by validation.

        Args:
            client_id: Anilist client ID (numeric)
            client_secret: Anilist client secret
            token_file: JSON file holding a previously obtained token

        Returns:
            Constructed client

        Raises:
            AnilistError: If the id is not numeric or the token file is unusable
        """
        if client_id and not client_id.isdigit():
            raise AnilistError(f"anilist client id should be a number, got '{client_id}'")

        access_token = None
        if token_file is not None and token_file.exists():
            access_token = _read_token(token_file)
            logger.debug(f"Loaded cached Anilist token from {token_file}")

        return cls(client_id, client_secret, access_token)

    def __repr__(self) -> str:
        return f"AnilistClient(id={self.id!r}, authorized={self.is_authorized})"


def _read_token(token_file: Path) -> str:
    try:
        with open(token_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise AnilistError(f"failed to read anilist token from {token_file}: {e}", details=str(e))

    token = data.get("access_token") if isinstance(data, dict) else None
    if not isinstance(token, str) or not token:
        raise AnilistError(f"anilist token file {token_file} has no access_token")

    return token


__all__ = [
    "TOKEN_FILE_NAME",
    "AnilistClient",
]
