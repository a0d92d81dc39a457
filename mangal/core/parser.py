"""
Document Parser - Raw TOML bytes to the intermediate config document.
"""

import logging
import tomllib

from pydantic import ValidationError as SchemaValidationError

from mangal.core.config_schemas import ConfigDocument
from mangal.core.exceptions import ParseError


logger = logging.getLogger(__name__)


def parse_document(data: bytes) -> ConfigDocument:
    """
    Parse a configuration document.

    Unknown keys are ignored and missing keys keep their zero values.

    Args:
        data: Raw UTF-8 encoded TOML

    Returns:
        Parsed ConfigDocument

    Raises:
        ParseError: If the bytes are not UTF-8, not well-formed TOML, or a
            known key holds a value of the wrong type
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Configuration is not valid UTF-8: {e}", details=str(e))

    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(
            f"Configuration is not valid TOML: {e}",
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
            details=str(e),
        )

    try:
        document = ConfigDocument.model_validate(raw)
    except SchemaValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ParseError(
            f"Invalid value for '{location}': {first['msg']}",
            details=str(e),
        )

    logger.debug(f"Parsed configuration document with keys: {sorted(document.model_fields_set)}")
    return document


__all__ = ["parse_document"]
