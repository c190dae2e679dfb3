"""Extension allow-list check."""

import posixpath
from collections.abc import Collection


def get_extension(path: str) -> str:
    """Return the text after the last dot of the file name (the whole name if it has none)."""
    return posixpath.basename(path).rsplit(".", 1)[-1]


def is_authorized_file(path: str, authorized_exts: Collection[str]) -> bool:
    """
    Check a file's extension against an allow-list.

    The comparison is exact and case-sensitive: list ``"jpg"`` and ``"JPG"``
    to accept both.

    Args:
        path: File path
        authorized_exts: Allowed extensions, without the leading dot

    Returns:
        True if the extension is in the allow-list
    """
    return get_extension(path) in authorized_exts
