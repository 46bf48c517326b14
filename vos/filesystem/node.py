"""
Node Module

Directory and file nodes of the namespace tree. A directory exclusively
owns its children; nodes keep no reference to their parent.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterator, Optional, Tuple, Union

from .permissions import DEFAULT_DIR_PERMISSIONS, DEFAULT_FILE_PERMISSIONS


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class NodeType(Enum):
    """Kinds of namespace node; values are the persisted type tags."""
    DIRECTORY = 'directory'
    FILE = 'file'


@dataclass
class FileNode:
    """
    A file with string content.

    ``size`` is the UTF-8 byte length of the content and is always derived
    from it.
    """

    content: str = ''
    permissions: str = DEFAULT_FILE_PERMISSIONS
    created: datetime = field(default_factory=utcnow)
    modified: datetime = field(default_factory=utcnow)

    node_type = NodeType.FILE

    @property
    def size(self) -> int:
        return len(self.content.encode('utf-8'))

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def is_file(self) -> bool:
        return True

    def write(self, content: str, when: Optional[datetime] = None) -> None:
        """Replace the content and bump the modification time."""
        self.content = content
        self.modified = when or utcnow()

    def chmod(self, permissions: str, when: Optional[datetime] = None) -> None:
        self.permissions = permissions
        self.modified = when or utcnow()


@dataclass
class DirectoryNode:
    """A directory mapping child names to nodes."""

    children: dict[str, 'Node'] = field(default_factory=dict)
    permissions: str = DEFAULT_DIR_PERMISSIONS
    created: datetime = field(default_factory=utcnow)
    modified: datetime = field(default_factory=utcnow)

    node_type = NodeType.DIRECTORY

    @property
    def size(self) -> int:
        return 0

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def is_file(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return not self.children

    def get_entry(self, name: str) -> Optional['Node']:
        """Get a child by name."""
        return self.children.get(name)

    def add_entry(self, name: str, node: 'Node') -> None:
        """Attach a child, replacing any child of the same name."""
        self.children[name] = node

    def remove_entry(self, name: str) -> Optional['Node']:
        """Detach a child and return it (with its subtree)."""
        return self.children.pop(name, None)

    def list_entries(self) -> Iterator[Tuple[str, 'Node']]:
        return iter(list(self.children.items()))

    def chmod(self, permissions: str, when: Optional[datetime] = None) -> None:
        self.permissions = permissions
        self.modified = when or utcnow()


Node = Union[DirectoryNode, FileNode]


def describe(name: str, node: Node) -> dict[str, Any]:
    """Listing entry for a node, as returned by ``list_directory``."""
    return {
        'name': name,
        'type': node.node_type.value,
        'permissions': node.permissions,
        'size': node.size,
        'modified': node.modified,
    }
