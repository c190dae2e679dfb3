"""
Image association pipeline.

Finds content files matching a glob pattern, looks up the image directory next
to each of them, and attaches the authorized image paths to the content file's
metadata. The file collection is mutated in place and shared by every pass.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger

from ..files import FileCollection
from ..matchers import GlobstarMatcher, PatternMatcher
from ..options import ImageOptions, OptionsInput, normalize_options_list, resolve_options
from .extensions import is_authorized_file
from .scanner import get_files_in_directory

PipelineStage = Callable[..., Awaitable[None]]


def existing_images(value: Any) -> list[Any]:
    """Return the images already stored on a record as a new list.

    A single value (such as a front-matter string) becomes a one-item list.
    """
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def unique(items: list[Any]) -> list[Any]:
    """Drop repeated items, keeping first occurrences.

    Uses equality rather than hashing, so records stored as dicts are fine.
    """
    seen: list[Any] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def get_matching_files(
    files: FileCollection,
    pattern: str,
    matcher: PatternMatcher | None = None,
) -> list[str]:
    """
    List the collection paths matching a pattern.

    Args:
        files: File collection
        pattern: Glob pattern
        matcher: Pattern matcher (defaults to GlobstarMatcher)

    Returns:
        Matching paths in collection iteration order
    """
    matcher = matcher or GlobstarMatcher()
    return [path for path in files if matcher.matches(path, pattern)]


def add_images_to_files(
    files: FileCollection,
    options: OptionsInput = None,
    matcher: PatternMatcher | None = None,
) -> int:
    """
    Run one association pass over the file collection.

    Content files without any file in their image directory are left
    untouched; no empty image list is created for them. Images already listed
    under the key (from an earlier pass) are kept, and the merged list is
    deduplicated keeping first occurrences.

    Args:
        files: File collection, mutated in place
        options: Options for this pass (partial mapping or ImageOptions)
        matcher: Pattern matcher (defaults to GlobstarMatcher)

    Returns:
        Number of content files whose metadata was written
    """
    options = resolve_options(options)
    matching_files = get_matching_files(files, options.pattern, matcher)
    logger.debug(
        "Pattern '{}' matched {} of {} files", options.pattern, len(matching_files), len(files)
    )

    updated = 0
    for content_path in matching_files:
        # The collection may have been narrowed since the match list was built
        if content_path not in files:
            logger.debug("Skipping {}: no longer in the file collection", content_path)
            continue

        candidates = get_files_in_directory(files, content_path, options.images_directory)
        if not candidates:
            continue

        record = files[content_path]
        images = existing_images(record.get(options.images_key))
        images.extend(
            path for path in candidates if is_authorized_file(path, options.authorized_exts)
        )
        record[options.images_key] = unique(images)
        updated += 1

        logger.debug(
            "{}: {} image(s) under '{}'",
            content_path,
            len(record[options.images_key]),
            options.images_key,
        )

    return updated


def run(
    files: FileCollection,
    options: OptionsInput | list[OptionsInput] | tuple[OptionsInput, ...] = None,
    matcher: PatternMatcher | None = None,
) -> int:
    """
    Apply one or several option sets, in order, over the same collection.

    Each pass sees the metadata written by the passes before it, so a later,
    broader pattern adds to what an earlier, narrower one attached.

    Args:
        files: File collection, mutated in place
        options: None, one options value, or a list of them
        matcher: Pattern matcher shared by all passes

    Returns:
        Total number of metadata writes across passes
    """
    options_list: list[ImageOptions] = normalize_options_list(options)
    matcher = matcher or GlobstarMatcher()

    total = 0
    for index, pass_options in enumerate(options_list, 1):
        count = add_images_to_files(files, pass_options, matcher)
        logger.info(
            "Image pass {}/{} (pattern '{}'): {} file(s) updated",
            index,
            len(options_list),
            pass_options.pattern,
            count,
        )
        total += count

    return total


def images_plugin(
    options: OptionsInput | list[OptionsInput] | tuple[OptionsInput, ...] = None,
    matcher: PatternMatcher | None = None,
) -> PipelineStage:
    """
    Create an async build pipeline stage attaching images to content files.

    Options are normalized when the stage is created, so malformed
    configuration fails at setup time rather than mid-build.

    Args:
        options: None, one options value, or a list of them
        matcher: Pattern matcher (defaults to GlobstarMatcher)

    Returns:
        Coroutine function ``stage(files, metadata=None)``

    Example:
        >>> stage = images_plugin([{"pattern": "projects/*.md"}, {"imagesKey": "gallery"}])
        >>> await stage(files)
    """
    options_list = normalize_options_list(options)
    matcher = matcher or GlobstarMatcher()

    async def stage(files: FileCollection, metadata: dict[str, Any] | None = None) -> None:
        # Yield to the event loop once before the synchronous pass
        await asyncio.sleep(0)
        run(files, options_list, matcher)

    return stage
