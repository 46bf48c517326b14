"""
Namespace Engine Module

The public face of the virtual namespace:
- Path resolution against a working-directory cursor
- Directory and file CRUD
- Permission changes
- Recursive name search
- Save after every successful mutation

Every public operation returns an OperationResult; namespace errors are
caught at this boundary and never propagate to the caller.

Author: YSNRFD
Version: 1.0.0
"""

from functools import wraps
from typing import Any, Optional

from .node import DirectoryNode, FileNode, Node, describe, utcnow
from .path_resolver import PathResolver, ROOT
from .pattern import compile_pattern
from .permissions import PermissionCodec
from .result import OperationResult
from .tree import NamespaceTree
from vos.core.config_loader import Config, validate_config
from vos.core.subsystem import Subsystem, SubsystemState
from vos.exceptions import (
    NamespaceError,
    NodeNotFoundError,
    NodeExistsError,
    DirectoryNotEmptyError,
    NotAFileError,
    NotADirectoryError,
    PersistenceError,
)
from vos.storage.kv_store import KeyValueStore, create_store
from vos.storage.persistence import PersistenceAdapter


WELCOME_TEXT = (
    'Welcome to the Virtual OS Simulator!\n'
    'Type "help" to see available commands.'
)


def operation(mutating: bool = False):
    """
    Mark an engine method as a public operation.

    The wrapped method returns its payload or raises a NamespaceError; the
    wrapper turns either into an OperationResult. Mutating operations save
    the namespace after they succeed.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self: 'NamespaceEngine', *args, **kwargs) -> OperationResult:
            try:
                value = func(self, *args, **kwargs)
            except NamespaceError as e:
                self._logger.debug(
                    f"{func.__name__} failed",
                    context={'kind': e.kind, 'name': e.name}
                )
                return OperationResult.fail(e)

            if mutating:
                self._save()
            return OperationResult.ok(value)

        return wrapper
    return decorator


def build_default_tree(
    home: str = '/home/user',
    dir_permissions: str = 'rwxr-xr-x',
    file_permissions: str = 'rw-r--r--'
) -> NamespaceTree:
    """
    Build the tree a fresh engine starts with.

    Layout: the home directory with Documents/, Pictures/ and welcome.txt;
    /bin with a few executables; /etc with passwd and hostname; /tmp.
    """
    now = utcnow()
    tree = NamespaceTree(DirectoryNode(permissions=dir_permissions, created=now, modified=now))

    def mkdirs(path: str) -> DirectoryNode:
        current = tree.root
        for name in PathResolver.components(path):
            child = current.get_entry(name)
            if child is None:
                child = DirectoryNode(permissions=dir_permissions, created=now, modified=now)
                current.add_entry(name, child)
            current = child
        return current

    def touch(directory: DirectoryNode, name: str, content: str, permissions: str) -> None:
        directory.add_entry(
            name,
            FileNode(content=content, permissions=permissions, created=now, modified=now)
        )

    home_dir = mkdirs(home)
    mkdirs(PathResolver.child(home, 'Documents'))
    mkdirs(PathResolver.child(home, 'Pictures'))
    touch(home_dir, 'welcome.txt', WELCOME_TEXT, file_permissions)

    bin_dir = mkdirs('/bin')
    for command in ('ls', 'mkdir', 'rm'):
        touch(bin_dir, command, f'#!/bin/bash\n# {command} binary', 'rwxr-xr-x')

    etc_dir = mkdirs('/etc')
    touch(
        etc_dir,
        'passwd',
        'root:x:0:0:root:/root:/bin/bash\n'
        f'user:x:1000:1000:user:{home}:/bin/bash',
        file_permissions
    )
    touch(etc_dir, 'hostname', 'virtual-os', file_permissions)

    mkdirs('/tmp')
    return tree


class NamespaceEngine(Subsystem):
    """
    Virtual namespace with a working-directory cursor.

    The engine is single-threaded. Hosts that share one engine between
    threads must serialize calls themselves. The constructor raises
    ConfigValidationError for an invalid config.

    Example:
        >>> engine = NamespaceEngine(MemoryStore())
        >>> engine.create_file('notes.txt', 'hello').success
        True
        >>> engine.read_file('~/notes.txt').value
        'hello'
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        config: Optional[Config] = None
    ):
        super().__init__('filesystem')
        self._config = config or Config()
        validate_config(self._config)
        fs_config = self._config.filesystem
        self._home = PathResolver.join(ROOT, fs_config.home_path)
        self._dir_permissions = fs_config.default_dir_permissions
        self._file_permissions = fs_config.default_file_permissions

        if store is None:
            store = create_store(self._config)
        self._persistence = PersistenceAdapter(store, key=self._config.storage.key)

        self._tree = NamespaceTree()
        self._cursor = ROOT
        self._last_save_error: Optional[PersistenceError] = None

        self.initialize()

    # Lifecycle

    def initialize(self) -> None:
        """Restore the persisted namespace, or boot the default tree."""
        self.set_state(SubsystemState.INITIALIZING)

        restored = self._persistence.load()
        if restored is not None:
            self._tree, self._cursor = restored
            self._logger.info(
                "Namespace restored",
                context={'cursor': self._cursor, 'key': self._persistence.key}
            )
        else:
            self._bootstrap()
            self._logger.info("Namespace initialized with default tree", context={'home': self._home})

        self.set_state(SubsystemState.INITIALIZED)

    def stop(self) -> None:
        """Flush the namespace to storage and stop."""
        self._logger.info("Stopping namespace engine")
        self._save()
        super().stop()

    def cleanup(self) -> None:
        """Final save; the engine holds no other resources."""
        self._save()

    def _bootstrap(self) -> None:
        self._tree = build_default_tree(
            self._home,
            dir_permissions=self._dir_permissions,
            file_permissions=self._file_permissions
        )
        self._cursor = self._home

    # Accessors

    @property
    def tree(self) -> NamespaceTree:
        return self._tree

    @property
    def current_path(self) -> str:
        return self._cursor

    @property
    def home(self) -> str:
        return self._home

    @property
    def persistence(self) -> PersistenceAdapter:
        return self._persistence

    @property
    def last_save_error(self) -> Optional[PersistenceError]:
        """The error of the most recent failed save, cleared by a good one."""
        return self._last_save_error

    # Internals

    def _resolve(self, path: str) -> str:
        return PathResolver.resolve(path, self._cursor, self._home)

    def _save(self) -> None:
        try:
            self._persistence.save(self._tree, self._cursor)
        except PersistenceError as e:
            self._last_save_error = e
            self._logger.error(
                "Failed to persist namespace",
                context={'key': self._persistence.key, 'error': e.message}
            )
        else:
            self._last_save_error = None

    @staticmethod
    def _basename(path: str) -> str:
        return PathResolver.split(path)[1] or ROOT

    def _lookup_directory(self, path: str) -> DirectoryNode:
        node = self._tree.lookup(path)
        if not node.is_directory:
            raise NotADirectoryError(self._basename(path), path=path)
        return node

    # Operations

    @operation()
    def list_directory(self, path: str = '.') -> list[dict[str, Any]]:
        """
        List the entries of a directory.

        Args:
            path: Directory to list (default: the cursor)

        Returns:
            One ``{name, type, permissions, size, modified}`` dict per child
        """
        resolved = self._resolve(path)
        directory = self._lookup_directory(resolved)
        return [describe(name, child) for name, child in directory.list_entries()]

    @operation(mutating=True)
    def change_directory(self, path: str) -> str:
        """
        Move the cursor.

        Returns:
            The new canonical cursor path
        """
        resolved = self._resolve(path)
        self._lookup_directory(resolved)
        self._cursor = resolved
        self._logger.debug("Changed directory", context={'path': resolved})
        return resolved

    @operation(mutating=True)
    def make_directory(self, path: str) -> str:
        """
        Create a directory.

        Raises (as a failed result):
            NodeExistsError: If the name is taken by a file or directory
        """
        resolved = self._resolve(path)
        parent, name = self._tree.parent_and_name(resolved)

        if parent.get_entry(name) is not None:
            raise NodeExistsError(name, path=resolved)

        now = utcnow()
        parent.add_entry(
            name,
            DirectoryNode(permissions=self._dir_permissions, created=now, modified=now)
        )

        self._logger.debug("Created directory", context={'path': resolved})
        return resolved

    @operation(mutating=True)
    def create_file(self, path: str, content: str = '') -> dict[str, Any]:
        """
        Create a file, or overwrite whatever node already has that name.

        An overwritten node keeps its creation time.

        Returns:
            ``{path, created}`` where ``created`` is False for an overwrite
        """
        resolved = self._resolve(path)
        parent, name = self._tree.parent_and_name(resolved)

        existing = parent.get_entry(name)
        now = utcnow()
        parent.add_entry(name, FileNode(
            content=content,
            permissions=self._file_permissions,
            created=existing.created if existing is not None else now,
            modified=now,
        ))

        if existing is not None and existing.is_directory and PathResolver.is_within(self._cursor, resolved):
            self._cursor = PathResolver.split(resolved)[0]

        self._logger.debug(
            "Created file" if existing is None else "Overwrote file",
            context={'path': resolved, 'size': parent.get_entry(name).size}
        )
        return {'path': resolved, 'created': existing is None}

    @operation()
    def read_file(self, path: str) -> str:
        """Return the content of a file."""
        resolved = self._resolve(path)
        node = self._tree.lookup(resolved)
        if node.is_directory:
            raise NotAFileError(self._basename(resolved), path=resolved)
        return node.content

    @operation(mutating=True)
    def write_file(self, path: str, content: str) -> str:
        """
        Replace the content of a file, creating it if needed.

        An existing file keeps its permissions and creation time.
        """
        resolved = self._resolve(path)
        parent, name = self._tree.parent_and_name(resolved)

        existing = parent.get_entry(name)
        if existing is None:
            now = utcnow()
            parent.add_entry(name, FileNode(
                content=content,
                permissions=self._file_permissions,
                created=now,
                modified=now,
            ))
        elif existing.is_directory:
            raise NotAFileError(name, path=resolved)
        else:
            existing.write(content)

        self._logger.debug("Wrote file", context={'path': resolved, 'bytes': len(content)})
        return resolved

    @operation(mutating=True)
    def remove(self, path: str, recursive: bool = False) -> str:
        """
        Remove a file or directory.

        Args:
            path: Node to remove
            recursive: Allow removing a directory that still has entries

        A cursor inside the removed subtree moves to the removed node's
        parent.
        """
        resolved = self._resolve(path)
        parent, name = self._tree.parent_and_name(resolved)

        node = parent.get_entry(name)
        if node is None:
            raise NodeNotFoundError(name, path=resolved)

        if node.is_directory and not node.is_empty() and not recursive:
            raise DirectoryNotEmptyError(name, path=resolved, entries=len(node.children))

        parent.remove_entry(name)

        if PathResolver.is_within(self._cursor, resolved):
            self._cursor = PathResolver.split(resolved)[0]

        self._logger.debug(
            "Removed node",
            context={'path': resolved, 'recursive': recursive}
        )
        return resolved

    @operation(mutating=True)
    def change_permissions(self, path: str, mode: str) -> str:
        """
        Set permissions from an octal ("755") or symbolic ("rwxr-xr-x") mode.

        Returns:
            The stored symbolic permissions
        """
        resolved = self._resolve(path)
        node = self._tree.lookup(resolved)
        permissions = PermissionCodec.normalize(mode)
        node.chmod(permissions)

        self._logger.debug("Changed permissions", context={'path': resolved, 'mode': permissions})
        return permissions

    @operation()
    def find_files(self, start_dir: str, pattern: str, literal: bool = False) -> list[str]:
        """
        Search a subtree for entries whose name matches a glob-lite pattern.

        Args:
            start_dir: Directory to search below
            pattern: ``*`` matches any run, ``?`` a single character
            literal: Treat every other character literally

        Returns:
            Absolute paths of matching files and directories
        """
        resolved = self._resolve(start_dir)
        directory = self._lookup_directory(resolved)
        regex = compile_pattern(pattern, literal=literal)

        return [
            child_path
            for child_path, name, _ in self._tree.walk(directory, resolved)
            if regex.match(name)
        ]

    @operation()
    def file_exists(self, path: str) -> bool:
        return self._tree.exists(self._resolve(path))

    @operation()
    def get_file_details(self, path: str) -> dict[str, Any]:
        """Return name, type, permissions, size and timestamps of a node."""
        resolved = self._resolve(path)
        node: Node = self._tree.lookup(resolved)
        return {
            'name': self._basename(resolved),
            'type': node.node_type.value,
            'permissions': node.permissions,
            'size': node.size,
            'created': node.created,
            'modified': node.modified,
            'is_directory': node.is_directory,
        }

    @operation()
    def get_current_directory(self) -> str:
        return self._cursor

    @operation()
    def save(self) -> bool:
        """Persist the namespace now; fails if the store rejects it."""
        self._persistence.save(self._tree, self._cursor)
        self._last_save_error = None
        return True

    @operation(mutating=True)
    def reset(self) -> str:
        """Throw away the namespace and boot the default tree again."""
        self._bootstrap()
        self._logger.info("Namespace reset to default tree")
        return self._cursor

    @operation()
    def get_stats(self) -> dict[str, Any]:
        """Get namespace statistics."""
        directories, files, total_size = self._tree.count()
        return {
            'directories': directories,
            'files': files,
            'total_size': total_size,
            'current_path': self._cursor,
        }
