"""
content-images.

Attaches image files to content files in a static-site build, based on an
image directory sitting next to each content file.

Usage:
    from content_images import images_plugin, run

    # Inside a build script
    run(files, {"pattern": "projects/**/*.md", "authorizedExts": ["jpg", "png"]})

    # As an async pipeline stage
    stage = images_plugin([{"pattern": "blog/*.md"}, {"imagesKey": "gallery"}])
    await stage(files)

    # From the command line
    content-images scan ./src
"""

__version__ = "0.1.0"

from .association import (
    add_images_to_files,
    get_files_in_directory,
    get_matching_files,
    images_plugin,
    is_authorized_file,
    run,
)
from .options import DEFAULT_AUTHORIZED_EXTS, ImageOptions, normalize_options_list, resolve_options

__all__ = [
    "DEFAULT_AUTHORIZED_EXTS",
    "ImageOptions",
    "add_images_to_files",
    "get_files_in_directory",
    "get_matching_files",
    "images_plugin",
    "is_authorized_file",
    "normalize_options_list",
    "resolve_options",
    "run",
]
