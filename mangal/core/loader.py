"""
Configuration Loader - Load a config file, falling back to defaults.

A broken user configuration must never block the application. Loading
is an ordered chain of steps (locate, check existence, read, parse,
assemble); the first step that fails stops the chain and the default
document is assembled instead. The result records which step caused the
fallback. In strict mode the failure is raised instead. Validation is
left to the caller.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from mangal.core.assembler import assemble
from mangal.core.config_defaults import default_document
from mangal.core.exceptions import ConfigurationError, MangalError, ParseError
from mangal.core.models import ResolvedConfig
from mangal.core.parser import parse_document
from mangal.core.paths import CONFIG_FILE_NAME, user_config_dir


logger = logging.getLogger(__name__)


class FallbackReason(str, Enum):
    """Step of the load chain that made it fall back to defaults."""

    LOCATION = "location"
    MISSING = "missing"
    UNREADABLE = "unreadable"
    MALFORMED = "malformed"
    ASSEMBLY = "assembly"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a configuration."""

    config: ResolvedConfig
    path: Optional[Path] = None
    fallback_reason: Optional[FallbackReason] = None
    error: Optional[Exception] = None

    @property
    def used_defaults(self) -> bool:
        return self.fallback_reason is not None


def config_file_location() -> Path:
    """Get the platform location of the user configuration file."""
    return user_config_dir() / CONFIG_FILE_NAME


@dataclass(frozen=True)
class _Failure:
    reason: FallbackReason
    path: Optional[Path]
    error: Optional[Exception] = None

    def as_error(self) -> MangalError:
        if isinstance(self.error, MangalError):
            return self.error
        if self.reason is FallbackReason.MISSING:
            return ConfigurationError(f"config at path {self.path} doesn't exist", str(self.path))
        path = str(self.path) if self.path else None
        return ConfigurationError(f"Configuration could not be loaded: {self.error}", path, details=self.error)


def _load(
    path: Optional[Union[str, Path]],
    cache_root: Optional[Path],
) -> Union[LoadResult, _Failure]:
    """Run the load chain, stopping at the first failing step."""
    if path:
        config_path = Path(path)
    else:
        try:
            config_path = config_file_location()
        except (OSError, RuntimeError) as e:
            return _Failure(FallbackReason.LOCATION, None, e)

    try:
        exists = config_path.is_file()
    except OSError as e:
        return _Failure(FallbackReason.UNREADABLE, config_path, e)

    if not exists:
        return _Failure(FallbackReason.MISSING, config_path)

    try:
        contents = config_path.read_bytes()
    except OSError as e:
        return _Failure(FallbackReason.UNREADABLE, config_path, e)

    try:
        document = parse_document(contents)
    except ParseError as e:
        e.config_path = str(config_path)
        return _Failure(FallbackReason.MALFORMED, config_path, e)

    try:
        config = assemble(document, cache_root=cache_root)
    except (MangalError, OSError, RuntimeError) as e:
        # RuntimeError: no home directory to place the cache or token under
        return _Failure(FallbackReason.ASSEMBLY, config_path, e)

    return LoadResult(config=config, path=config_path)


def load_config(
    path: Optional[Union[str, Path]] = None,
    cache_root: Optional[Path] = None,
    strict: bool = False,
) -> LoadResult:
    """
    Load the configuration, falling back to defaults on any failure.

    Args:
        path: Configuration file; the platform location if empty or None
        cache_root: Root of the per-user cache (platform default if None)
        strict: Raise instead of falling back to defaults

    Returns:
        LoadResult holding the configuration and the fallback reason, if any

    Raises:
        MangalError: Only in strict mode, describing the failed step
    """
    outcome = _load(path, cache_root)

    if isinstance(outcome, LoadResult):
        logger.info(f"Configuration loaded from {outcome.path}")
        return outcome

    if strict:
        raise outcome.as_error()

    if outcome.reason is FallbackReason.MISSING:
        logger.info(f"No configuration at {outcome.path}, using defaults")
    else:
        logger.warning(
            f"Configuration {outcome.path or ''} not used ({outcome.reason.value}): "
            f"{outcome.error}. Using defaults"
        )

    return LoadResult(
        config=assemble(default_document(), cache_root=cache_root),
        path=outcome.path,
        fallback_reason=outcome.reason,
        error=outcome.error,
    )


def resolve_config(path: Optional[Union[str, Path]] = None) -> ResolvedConfig:
    """
    Get a usable configuration for ``path``. Never raises.

    Args:
        path: Configuration file; the platform location if empty or None

    Returns:
        The user configuration, or the default one if it cannot be used
    """
    return load_config(path).config


__all__ = [
    "FallbackReason",
    "LoadResult",
    "config_file_location",
    "load_config",
    "resolve_config",
]
