"""Glob matcher with globstar support, backed by wcmatch."""

from loguru import logger
from wcmatch import glob

from .base import PatternMatcher


class GlobstarMatcher(PatternMatcher):
    """Glob matching where ``**`` spans directories and ``*`` stays in one segment.

    ``**/*.md`` matches ``one.md`` as well as ``a/b/one.md``. Paths are always
    treated as POSIX paths, whatever the host platform.
    """

    def __init__(self, dotglob: bool = False):
        """
        Initialize the matcher.

        Args:
            dotglob: Let wildcards match hidden files and directories
        """
        self.flags = glob.GLOBSTAR | glob.FORCEUNIX
        if dotglob:
            self.flags |= glob.DOTGLOB
        logger.debug("GlobstarMatcher initialized: dotglob={}", dotglob)

    @property
    def name(self) -> str:
        """Return the matcher identifier."""
        return "glob"

    def matches(self, path: str, pattern: str) -> bool:
        """Test a path against a glob pattern."""
        return glob.globmatch(path, pattern, flags=self.flags)
