"""
VOS Namespace Module

An in-memory directory tree with:
- Path resolution against a working-directory cursor
- File and directory operations
- Octal and symbolic permissions
- Glob-lite search
- Save after mutation
"""

from .path_resolver import PathResolver
from .permissions import PermissionCodec, DEFAULT_DIR_PERMISSIONS, DEFAULT_FILE_PERMISSIONS
from .node import NodeType, DirectoryNode, FileNode, Node
from .tree import NamespaceTree
from .pattern import compile_pattern, glob_to_regex
from .result import OperationResult
from .engine import NamespaceEngine, build_default_tree

__all__ = [
    # Path Resolver
    'PathResolver',
    # Permissions
    'PermissionCodec',
    'DEFAULT_DIR_PERMISSIONS',
    'DEFAULT_FILE_PERMISSIONS',
    # Nodes
    'NodeType',
    'DirectoryNode',
    'FileNode',
    'Node',
    # Tree
    'NamespaceTree',
    # Patterns
    'compile_pattern',
    'glob_to_regex',
    # Engine
    'OperationResult',
    'NamespaceEngine',
    'build_default_tree',
]
