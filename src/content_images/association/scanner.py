"""Lookup of files sitting directly in a directory of the file collection."""

import posixpath
from collections.abc import Iterable


def parent_directory(path: str) -> str:
    """Return the parent directory of a collection path (``.`` for top-level files)."""
    return posixpath.dirname(path) or "."


def resolve_directory(reference_path: str, relative_dir: str) -> str:
    """Resolve ``relative_dir`` against the directory holding ``reference_path``."""
    return posixpath.normpath(posixpath.join(parent_directory(reference_path), relative_dir))


def get_files_in_directory(
    files: Iterable[str],
    reference_path: str,
    relative_dir: str,
) -> list[str]:
    """
    Get the files located directly in a directory relative to a reference file.

    Only direct children are returned; files in nested folders are not.
    ``relative_dir`` may be ``.`` to list the reference file's own directory.

    Args:
        files: File collection (or any iterable of its paths)
        reference_path: Path of the content file
        relative_dir: Directory name relative to the content file's directory

    Returns:
        Sorted list of matching paths, empty if the directory holds nothing
    """
    directory = resolve_directory(reference_path, relative_dir)
    return sorted(path for path in files if parent_directory(path) == directory)
