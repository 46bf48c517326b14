"""
Namespace Tree Module

Owns the root directory and locates nodes and parents by canonical
absolute path. Lookups never mutate the tree; callers mutate the
returned nodes.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Iterator, Optional, Tuple

from .node import DirectoryNode, Node
from .path_resolver import PathResolver, ROOT
from vos.exceptions import (
    NodeNotFoundError,
    NotADirectoryError,
    NoParentError,
)


class NamespaceTree:
    """
    A strict tree of nodes rooted at ``/``.

    Example:
        >>> tree = NamespaceTree()
        >>> tree.root.add_entry('tmp', DirectoryNode())
        >>> tree.lookup('/tmp').is_directory
        True
    """

    def __init__(self, root: Optional[DirectoryNode] = None):
        self.root = root if root is not None else DirectoryNode()

    def _descend(self, path: str, parts: list[str]) -> Node:
        current: Node = self.root
        previous = ROOT

        for component in parts:
            if not current.is_directory:
                raise NotADirectoryError(previous, path=path)
            child = current.get_entry(component)
            if child is None:
                raise NodeNotFoundError(component, path=path)
            previous = component
            current = child

        return current

    def lookup(self, path: str) -> Node:
        """
        Find the node at a canonical absolute path.

        Raises:
            NodeNotFoundError: Naming the first missing component
            NotADirectoryError: Naming the file used as a directory
        """
        return self._descend(path, PathResolver.components(path))

    def parent_and_name(self, path: str) -> Tuple[DirectoryNode, str]:
        """
        Find the directory that holds (or would hold) ``path``.

        Returns:
            Tuple of (parent directory, base name)

        Raises:
            NoParentError: If ``path`` is the root
            NodeNotFoundError: If an ancestor is missing
            NotADirectoryError: If an ancestor is a file
        """
        parts = PathResolver.components(path)
        if not parts:
            raise NoParentError(path)

        parent = self._descend(path, parts[:-1])
        if not parent.is_directory:
            raise NotADirectoryError(parts[-2], path=path)
        return parent, parts[-1]

    def exists(self, path: str) -> bool:
        try:
            self.lookup(path)
        except (NodeNotFoundError, NotADirectoryError):
            return False
        return True

    def walk(
        self,
        directory: DirectoryNode,
        path: str = ROOT
    ) -> Iterator[Tuple[str, str, Node]]:
        """
        Depth-first walk below ``directory``.

        Each node is yielded before its own entries. The walk keeps an
        explicit stack, so depth is not bounded by the recursion limit.

        Yields:
            (absolute path, name, node) for every descendant
        """
        stack = [(path, directory.list_entries())]
        while stack:
            parent_path, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            name, node = entry
            child_path = PathResolver.child(parent_path, name)
            yield child_path, name, node
            if node.is_directory:
                stack.append((child_path, node.list_entries()))

    def count(self) -> Tuple[int, int, int]:
        """
        Count nodes below the root.

        Returns:
            Tuple of (directories, files, total file bytes)
        """
        directories = files = total = 0
        for _, _, node in self.walk(self.root):
            if node.is_directory:
                directories += 1
            else:
                files += 1
                total += node.size
        return directories, files, total
