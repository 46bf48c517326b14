"""
Path Resolver Module

Turns user-supplied path expressions into canonical absolute paths.

Handles:
- Absolute and relative paths
- . and .. components
- ~ and ~/ home expansion
- Repeated and trailing separators

Author: YSNRFD
Version: 1.0.0
"""

from typing import List, Tuple


ROOT = '/'
DEFAULT_HOME = '/home/user'


class PathResolver:
    """
    Pure path functions. No state of its own; the cursor and home
    directory are always passed in.

    Example:
        >>> PathResolver.resolve('../../x', '/home/user/docs')
        '/home/x'
    """

    @staticmethod
    def expand_home(path: str, home: str = DEFAULT_HOME) -> str:
        """
        Replace a bare ``~`` or a leading ``~/`` with the home path.

        Args:
            path: Path expression
            home: Absolute home directory

        Returns:
            Path with the home prefix expanded
        """
        if path == '~':
            return home
        if path.startswith('~/'):
            return home.rstrip('/') + path[1:]
        return path

    @staticmethod
    def components(path: str) -> List[str]:
        """
        Split a path on ``/`` and drop empty segments.

        The root path yields an empty list.
        """
        return [c for c in path.split('/') if c]

    @staticmethod
    def build(components: List[str]) -> str:
        """Build an absolute path from its components."""
        return ROOT + '/'.join(components)

    @staticmethod
    def join(base: str, relative: str) -> str:
        """
        Apply a relative path to a base path component by component.

        ``.`` is a no-op, ``..`` drops the last component (a no-op at the
        root), anything else is appended.

        Args:
            base: Absolute base path
            relative: Path to apply on top of it

        Returns:
            Canonical absolute path
        """
        result = PathResolver.components(base)

        for component in relative.split('/'):
            if not component or component == '.':
                continue
            if component == '..':
                if result:
                    result.pop()
            else:
                result.append(component)

        return PathResolver.build(result)

    @staticmethod
    def is_absolute(path: str) -> bool:
        """Check if a path is absolute."""
        return path.startswith(ROOT)

    @staticmethod
    def to_absolute(path: str, cursor: str) -> str:
        """
        Anchor a path at the cursor unless it is already absolute.

        Absolute inputs are returned untouched; relative ones come back
        normalized.
        """
        if PathResolver.is_absolute(path):
            return path
        return PathResolver.join(cursor, path)

    @staticmethod
    def resolve(path: str, cursor: str = ROOT, home: str = DEFAULT_HOME) -> str:
        """
        Resolve a path expression against a cursor.

        Args:
            path: Path to resolve
            cursor: Current working directory (canonical, absolute)
            home: Home directory used for ``~`` expansion

        Returns:
            Canonical absolute path
        """
        expanded = PathResolver.expand_home(path, home)

        if PathResolver.is_absolute(expanded):
            return PathResolver.join(ROOT, expanded)
        return PathResolver.join(cursor, expanded)

    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split a canonical absolute path into parent path and base name.

        The root splits into ``('/', '')``.
        """
        parts = PathResolver.components(path)
        if not parts:
            return (ROOT, '')
        return (PathResolver.build(parts[:-1]), parts[-1])

    @staticmethod
    def child(parent: str, name: str) -> str:
        """Path of an entry inside a canonical directory path."""
        if parent == ROOT:
            return ROOT + name
        return f"{parent}/{name}"

    @staticmethod
    def is_within(path: str, ancestor: str) -> bool:
        """Check whether ``path`` equals ``ancestor`` or lies below it."""
        if ancestor == ROOT:
            return True
        return path == ancestor or path.startswith(ancestor + '/')
