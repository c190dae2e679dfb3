"""
Options for the image association stage.

Options are accepted in the camelCase shape build configurations use
(``imagesDirectory``, ``authorizedExts``, ``imagesKey``) or by Python
field name, and resolved over the defaults.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AUTHORIZED_EXTS = ("jpg", "jpeg", "svg", "png", "gif", "JPG", "JPEG", "SVG", "PNG", "GIF")


class ImageOptions(BaseModel):
    """Resolved options for one association pass."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    pattern: str = Field(default="**/*.md", description="Glob selecting content files")
    images_directory: str = Field(
        default="images",
        alias="imagesDirectory",
        description="Image directory, relative to each content file's directory",
    )
    authorized_exts: tuple[str, ...] = Field(
        default=DEFAULT_AUTHORIZED_EXTS,
        alias="authorizedExts",
        description="Case-sensitive extensions allowed as images",
    )
    images_key: str = Field(
        default="images",
        alias="imagesKey",
        description="Metadata key receiving the image paths",
    )

    def as_config(self) -> dict[str, Any]:
        """Return the four recognized fields in configuration (camelCase) form."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            include={"pattern", "images_directory", "authorized_exts", "images_key"},
        )


OptionsInput = ImageOptions | Mapping[str, Any] | None


def resolve_options(user_options: OptionsInput = None) -> ImageOptions:
    """
    Merge user options over the defaults.

    Args:
        user_options: Partial mapping, an already resolved ImageOptions, or None

    Returns:
        Complete ImageOptions; unknown keys are kept as extras
    """
    if isinstance(user_options, ImageOptions):
        return user_options
    return ImageOptions.model_validate(dict(user_options or {}))


def normalize_options_list(
    options: OptionsInput | list[OptionsInput] | tuple[OptionsInput, ...] = None,
) -> list[ImageOptions]:
    """
    Normalize a single options value or a sequence of them into a list.

    Args:
        options: None, one options value, or a list/tuple of options values

    Returns:
        Resolved options, in the order given

    Raises:
        TypeError: If options is neither a mapping nor a list/tuple
    """
    if options is None or isinstance(options, (ImageOptions, Mapping)):
        return [resolve_options(options)]
    if isinstance(options, (list, tuple)):
        return [resolve_options(item) for item in options]
    raise TypeError(f"Unsupported options type: {type(options).__name__}")
