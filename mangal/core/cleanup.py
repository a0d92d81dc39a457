"""
Cleanup - Removal of temp files and cached images.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mangal.core.paths import APP_NAME, temp_root, user_cache_root


logger = logging.getLogger(__name__)


@dataclass
class CleanupReport:
    """Totals of a cleanup run."""

    files_removed: int = 0
    bytes_removed: int = 0

    @property
    def megabytes_removed(self) -> float:
        return self.bytes_removed / 1024 / 1024


def _size_of(path: Path) -> int:
    if path.is_file() or path.is_symlink():
        return path.lstat().st_size
    return sum(p.lstat().st_size for p in path.rglob("*") if p.is_file())


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def cleanup(temp_dir: Optional[Path] = None, cache_root: Optional[Path] = None) -> CleanupReport:
    """
    Remove Mangal temp entries and the image cache.

    Args:
        temp_dir: System temp directory (platform default if None)
        cache_root: Mangal cache directory (platform default if None)

    Returns:
        CleanupReport with the number of entries and bytes removed
    """
    temp_dir = temp_dir or temp_root()
    cache_root = cache_root or user_cache_root()
    report = CleanupReport()
    prefixes = (APP_NAME, APP_NAME.lower())

    if temp_dir.is_dir():
        for entry in temp_dir.iterdir():
            if not entry.name.startswith(prefixes):
                continue
            try:
                size = _size_of(entry)
                _remove(entry)
            except OSError as e:
                logger.warning(f"Failed to remove {entry}: {e}")
                continue
            report.files_removed += 1
            report.bytes_removed += size

    if cache_root.is_dir():
        cached = [p for p in cache_root.rglob("*") if p.is_file()]
        try:
            size = _size_of(cache_root)
            shutil.rmtree(cache_root)
        except OSError as e:
            logger.warning(f"Failed to remove cache {cache_root}: {e}")
        else:
            report.files_removed += len(cached)
            report.bytes_removed += size

    logger.info(f"Cleanup removed {report.files_removed} files ({report.bytes_removed} bytes)")
    return report


__all__ = [
    "CleanupReport",
    "cleanup",
]
