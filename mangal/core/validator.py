"""
Config Validator - Business rules over an assembled configuration.

Checks run in a fixed order and the first violation wins. Nothing is
mutated, so validating the same configuration again gives the same answer.
"""

import logging
from typing import Optional

from mangal.core.exceptions import MangalError, SourceError, ValidationError
from mangal.core.formats import FormatType
from mangal.core.models import ResolvedConfig
from mangal.core.paths import APP_NAME


logger = logging.getLogger(__name__)


TEMPLATE_PLACEHOLDERS = ("%d", "%0d", "%s")


def _check_template(template: str, field_name: str) -> Optional[ValidationError]:
    if any(placeholder in template for placeholder in TEMPLATE_PLACEHOLDERS):
        return None
    return ValidationError(
        f"chapter name template '{template}' should contain at least one %d, %0d or %s placeholder",
        field_name=field_name,
        invalid_value=template,
    )


def find_config_error(config: ResolvedConfig) -> Optional[MangalError]:
    """
    Find the first rule the configuration breaks.

    Args:
        config: Assembled configuration

    Returns:
        The error describing the first violation, or None if the
        configuration is ready to use. Source errors are returned as
        raised by the source itself.
    """
    if not config.sources:
        return ValidationError("no manga sources listed", field_name="use")

    error = _check_template(config.chapter_name_template, "chapter_name_template")
    if error:
        return error

    error = _check_template(config.ui.chapter_name_template, "ui.chapter_name_template")
    if error:
        return error

    if config.anilist.enabled and (not config.anilist.client_id or not config.anilist.client_secret):
        return ValidationError("anilist is enabled but id or secret is not set", field_name="anilist")

    if config.use_custom_reader and not config.custom_reader:
        return ValidationError(
            "use_custom_reader is set to true but reader isn't specified",
            field_name="custom_reader",
        )

    if not FormatType.is_valid(config.format):
        return ValidationError(
            f"unknown format '{config.format}'\n"
            f"type {APP_NAME.lower()} formats to show available formats",
            field_name="format",
            invalid_value=config.format,
        )

    for source in config.sources:
        try:
            source.validate()
        except SourceError as e:
            return e

    return None


def validate_config(config: ResolvedConfig) -> None:
    """
    Validate the configuration.

    Raises:
        ValidationError: If a configuration rule is broken
        SourceError: If an active source is structurally invalid
    """
    error = find_config_error(config)
    if error is not None:
        logger.debug(f"Configuration rejected: {error}")
        raise error


__all__ = [
    "TEMPLATE_PLACEHOLDERS",
    "find_config_error",
    "validate_config",
]
