"""Pattern matchers package.

Provides a factory function to create the configured pattern matcher.
"""

from .base import PatternMatcher
from .globstar import GlobstarMatcher


def create_pattern_matcher(matcher_type: str = "glob", **kwargs) -> PatternMatcher:
    """Create a pattern matcher instance.

    Args:
        matcher_type: Type of matcher (currently only "glob")
        **kwargs: Matcher-specific options (e.g. ``dotglob=True``)

    Returns:
        Configured PatternMatcher instance

    Raises:
        ValueError: If matcher_type is not recognized

    Example:
        >>> matcher = create_pattern_matcher("glob")
        >>> matcher.matches("posts/hello.md", "**/*.md")
        True

    """
    if matcher_type == "glob":
        return GlobstarMatcher(**kwargs)
    else:
        raise ValueError(f"Unknown pattern matcher: {matcher_type}")


__all__ = [
    "PatternMatcher",
    "GlobstarMatcher",
    "create_pattern_matcher",
]
