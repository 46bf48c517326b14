"""
Namespace Persistence

Serializes the namespace tree and cursor into a single JSON blob stored
under a fixed key, and restores it. Timestamps travel as ISO-8601
strings and come back as datetimes at every node.

Blob layout::

    {
      "fileSystem": {"/": {"type": "directory", "children": {...}, ...}},
      "currentPath": "/home/user"
    }

Author: YSNRFD
Version: 1.0.0
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional, Tuple

from vos.exceptions import NamespaceError, PersistenceError
from vos.filesystem.node import DirectoryNode, FileNode, Node, NodeType, utcnow
from vos.filesystem.path_resolver import PathResolver, ROOT
from vos.filesystem.permissions import (
    PermissionCodec,
    DEFAULT_DIR_PERMISSIONS,
    DEFAULT_FILE_PERMISSIONS,
)
from vos.filesystem.tree import NamespaceTree
from vos.logger import get_logger
from .kv_store import KeyValueStore


DEFAULT_KEY = 'virtualFileSystem'


class CorruptStateError(ValueError):
    """Persisted data does not describe a valid namespace."""


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp.

    A trailing ``Z`` is accepted and naive values are taken as UTC.
    """
    if not isinstance(value, str):
        raise CorruptStateError(f"Timestamp must be a string, got {type(value).__name__}")
    text = value[:-1] + '+00:00' if value.endswith('Z') else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise CorruptStateError(f"Invalid timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def serialize_node(node: Node) -> dict[str, Any]:
    """
    Convert a node, and its subtree, to plain JSON data.

    Trees nested deeper than the interpreter recursion limit raise
    RecursionError; ``PersistenceAdapter.save`` reports that as a
    PersistenceError.
    """
    data: dict[str, Any] = {'type': node.node_type.value}

    if node.is_directory:
        data['children'] = {
            name: serialize_node(child) for name, child in node.list_entries()
        }
    else:
        data['content'] = node.content

    data['permissions'] = node.permissions
    data['size'] = node.size
    data['created'] = format_timestamp(node.created)
    data['modified'] = format_timestamp(node.modified)
    return data


def _restore_permissions(raw: Any, default: str) -> str:
    if raw is None:
        return default
    # older blobs prefixed the type letter ("drwxr-xr-x")
    if isinstance(raw, str) and len(raw) == 10 and raw[0] in 'd-':
        raw = raw[1:]
    if not PermissionCodec.validate_symbolic(raw):
        raise CorruptStateError(f"Invalid permissions: {raw!r}")
    return raw


def _restore_dates(data: dict[str, Any]) -> Tuple[datetime, datetime]:
    # nodes written without timestamps get the load time
    now = utcnow()
    created = parse_timestamp(data['created']) if 'created' in data else now
    modified = parse_timestamp(data['modified']) if 'modified' in data else now
    return created, modified


def deserialize_node(data: Any) -> Node:
    """
    Rebuild a node, and its subtree, from JSON data.

    Raises:
        CorruptStateError: If the data is not a valid node
    """
    if not isinstance(data, dict):
        raise CorruptStateError("Node must be an object")

    raw_type = data.get('type')
    try:
        node_type = NodeType(raw_type)
    except ValueError:
        raise CorruptStateError(f"Unknown node type: {raw_type!r}") from None

    created, modified = _restore_dates(data)

    if node_type is NodeType.FILE:
        content = data.get('content', '')
        if not isinstance(content, str):
            raise CorruptStateError("File content must be a string")
        return FileNode(
            content=content,
            permissions=_restore_permissions(data.get('permissions'), DEFAULT_FILE_PERMISSIONS),
            created=created,
            modified=modified,
        )

    children = data.get('children', {})
    if not isinstance(children, dict):
        raise CorruptStateError("Directory children must be an object")

    directory = DirectoryNode(
        permissions=_restore_permissions(data.get('permissions'), DEFAULT_DIR_PERMISSIONS),
        created=created,
        modified=modified,
    )
    for name, child in children.items():
        if not name or '/' in name or name in ('.', '..'):
            raise CorruptStateError(f"Invalid entry name: {name!r}")
        directory.add_entry(name, deserialize_node(child))
    return directory


def serialize_state(tree: NamespaceTree, cursor: str) -> str:
    """Encode the tree and cursor as a JSON blob."""
    return json.dumps({
        'fileSystem': {ROOT: serialize_node(tree.root)},
        'currentPath': cursor,
    })


def deserialize_state(blob: str) -> Tuple[NamespaceTree, str]:
    """
    Decode a JSON blob into a tree and cursor.

    Raises:
        CorruptStateError: If the blob is malformed or the cursor does not
            name an existing directory
    """
    try:
        data = json.loads(blob)
    except ValueError as e:
        raise CorruptStateError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get('fileSystem'), dict):
        raise CorruptStateError("Missing 'fileSystem' object")

    root = deserialize_node(data['fileSystem'].get(ROOT))
    if not root.is_directory:
        raise CorruptStateError("Root must be a directory")

    cursor = data.get('currentPath', ROOT)
    if not isinstance(cursor, str) or not PathResolver.is_absolute(cursor):
        raise CorruptStateError(f"Invalid currentPath: {cursor!r}")
    cursor = PathResolver.join(ROOT, cursor)

    tree = NamespaceTree(root)
    try:
        node = tree.lookup(cursor)
    except NamespaceError as e:
        raise CorruptStateError(f"currentPath does not resolve: {cursor}") from e
    if not node.is_directory:
        raise CorruptStateError(f"currentPath is not a directory: {cursor}")

    return tree, cursor


class PersistenceAdapter:
    """
    Saves and restores the namespace through a key-value store.

    Example:
        >>> adapter = PersistenceAdapter(MemoryStore())
        >>> adapter.save(tree, '/home/user')
        >>> tree, cursor = adapter.load()
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_KEY):
        self.store = store
        self.key = key
        self._logger = get_logger('storage')

    def save(self, tree: NamespaceTree, cursor: str) -> None:
        """
        Write the tree and cursor under the fixed key.

        Raises:
            PersistenceError: If serialization or the store fails, including
                a tree too deep to encode
        """
        try:
            blob = serialize_state(tree, cursor)
            self.store.set(self.key, blob)
        except (OSError, TypeError, ValueError, RecursionError) as e:
            raise PersistenceError(
                f"Failed to save namespace: {e}",
                key=self.key,
                cause=e
            ) from e

        self._logger.debug(
            "Namespace saved",
            context={'key': self.key, 'bytes': len(blob)}
        )

    def load(self) -> Optional[Tuple[NamespaceTree, str]]:
        """
        Read the tree and cursor back.

        Returns:
            (tree, cursor), or None if nothing is stored or the stored
            data is corrupt
        """
        try:
            blob = self.store.get(self.key)
        except OSError as e:
            self._logger.warning(
                "Could not read persisted namespace",
                context={'key': self.key, 'error': str(e)}
            )
            return None

        if blob is None:
            return None

        try:
            tree, cursor = deserialize_state(blob)
        except (CorruptStateError, RecursionError) as e:
            self._logger.warning(
                "Discarding corrupt persisted namespace",
                context={'key': self.key, 'error': str(e)}
            )
            return None

        self._logger.debug("Namespace loaded", context={'key': self.key, 'cursor': cursor})
        return tree, cursor

    def clear(self) -> None:
        """Remove the persisted blob."""
        self.store.delete(self.key)
