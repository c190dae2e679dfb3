"""
File collection types.

A file collection maps a relative POSIX path to an open metadata record.
It is owned by the host build pipeline and shared by reference between
stages; nothing in this package copies it.
"""

from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from loguru import logger

FileRecord = MutableMapping[str, Any]
FileCollection = MutableMapping[str, FileRecord]


def load_file_collection(source_dir: Path | str) -> dict[str, dict[str, Any]]:
    """
    Build a file collection from a directory tree.

    Only paths are collected; file contents are never read. Each record
    starts out empty.

    Args:
        source_dir: Root directory of the build input

    Returns:
        Mapping of relative POSIX path to an empty metadata record,
        in sorted path order
    """
    root = Path(source_dir)
    files: dict[str, dict[str, Any]] = {}
    for path in sorted(root.rglob("*")):
        if path.is_file():
            files[path.relative_to(root).as_posix()] = {}

    logger.debug("Loaded {} files from {}", len(files), root)
    return files
