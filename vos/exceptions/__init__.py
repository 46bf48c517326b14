"""
VOS Exception Hierarchy

Architecture:
    NamespaceError (Base)
    ├── NodeNotFoundError
    ├── NodeExistsError
    ├── DirectoryNotEmptyError
    ├── NotAFileError
    ├── NotADirectoryError
    ├── InvalidPermissionFormatError
    ├── InvalidPatternError
    ├── NoParentError
    └── PersistenceError
    ConfigError
    └── ConfigValidationError
"""

from .fs_exceptions import (
    NamespaceError,
    NodeNotFoundError,
    NodeExistsError,
    DirectoryNotEmptyError,
    NotAFileError,
    NotADirectoryError,
    InvalidPermissionFormatError,
    InvalidPatternError,
    NoParentError,
    PersistenceError,
)

from .config_exceptions import (
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Namespace exceptions
    "NamespaceError",
    "NodeNotFoundError",
    "NodeExistsError",
    "DirectoryNotEmptyError",
    "NotAFileError",
    "NotADirectoryError",
    "InvalidPermissionFormatError",
    "InvalidPatternError",
    "NoParentError",
    "PersistenceError",
    # Configuration exceptions
    "ConfigError",
    "ConfigValidationError",
]
