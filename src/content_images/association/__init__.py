"""
Image association package.
"""

from .extensions import get_extension, is_authorized_file
from .pipeline import add_images_to_files, get_matching_files, images_plugin, run
from .scanner import get_files_in_directory

__all__ = [
    "add_images_to_files",
    "get_extension",
    "get_files_in_directory",
    "get_matching_files",
    "images_plugin",
    "is_authorized_file",
    "run",
]
