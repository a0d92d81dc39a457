"""
Output Formats - Supported chapter output formats.
"""

from enum import Enum
from typing import Dict, List


class FormatType(str, Enum):
    """Output format a downloaded chapter is written in."""

    PDF = "pdf"
    CBZ = "cbz"
    ZIP = "zip"
    PLAIN = "plain"
    EPUB = "epub"

    @classmethod
    def values(cls) -> List[str]:
        """Get all format names in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls.values()

    def __str__(self) -> str:
        return self.value


DEFAULT_FORMAT = FormatType.PDF

FORMAT_DESCRIPTIONS: Dict[FormatType, str] = {
    FormatType.PDF: "Chapters as PDF documents, one page per image",
    FormatType.CBZ: "Comic book archive, readable by most comic readers",
    FormatType.ZIP: "Zip archive of the raw images",
    FormatType.PLAIN: "Raw images stored in a folder per chapter",
    FormatType.EPUB: "E-book, one file per chapter",
}


__all__ = [
    "FormatType",
    "DEFAULT_FORMAT",
    "FORMAT_DESCRIPTIONS",
]
