"""
Core Layer - Configuration resolution and validation.

This module contains the configuration document schema, the default
document, the parser, assembler, validator and the load-with-fallback
entry points used by the CLI.
"""

from mangal.core.exceptions import (
    MangalError,
    ConfigurationError,
    ParseError,
    ValidationError,
    SourceError,
    AnilistError,
)
from mangal.core.formats import FormatType, FORMAT_DESCRIPTIONS
from mangal.core.config_schemas import ConfigDocument, SourceSpec
from mangal.core.config_defaults import (
    default_config,
    default_config_bytes,
    default_document,
)
from mangal.core.models import AnilistOptions, ResolvedConfig, UIOptions
from mangal.core.parser import parse_document
from mangal.core.assembler import assemble
from mangal.core.validator import find_config_error, validate_config
from mangal.core.loader import (
    FallbackReason,
    LoadResult,
    config_file_location,
    load_config,
    resolve_config,
)

__all__ = [
    # Exceptions
    "MangalError",
    "ConfigurationError",
    "ParseError",
    "ValidationError",
    "SourceError",
    "AnilistError",
    # Formats
    "FormatType",
    "FORMAT_DESCRIPTIONS",
    # Documents and defaults
    "ConfigDocument",
    "SourceSpec",
    "default_config",
    "default_config_bytes",
    "default_document",
    # Resolved configuration
    "AnilistOptions",
    "ResolvedConfig",
    "UIOptions",
    # Pipeline
    "parse_document",
    "assemble",
    "find_config_error",
    "validate_config",
    "FallbackReason",
    "LoadResult",
    "config_file_location",
    "load_config",
    "resolve_config",
]
