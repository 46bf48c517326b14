"""
Namespace Exceptions

Exceptions raised while resolving paths and mutating the namespace tree,
and while saving or restoring it. The engine catches these at its
boundary and hands them back inside an OperationResult.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class NamespaceError(Exception):
    """
    Base exception for all namespace errors.

    Attributes:
        message: Human-readable error description
        name: Offending path segment or input, if any
        path: Full path associated with the error, if known
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
        kind: Short error kind callers match on (e.g. "NotFound")
    """

    kind = "NamespaceError"

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.name = name
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if name is not None:
            self.context["name"] = name
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class NodeNotFoundError(NamespaceError):
    """
    A path component does not exist.

    Example:
        >>> raise NodeNotFoundError("Documents", path="/home/user/Documents/a.txt")
    """

    kind = "NotFound"

    def __init__(self, name: str, path: Optional[str] = None) -> None:
        super().__init__(
            message=f"'{name}' does not exist",
            name=name,
            path=path,
            error_code=4001
        )


class NodeExistsError(NamespaceError):
    """The creation target is already occupied."""

    kind = "AlreadyExists"

    def __init__(self, name: str, path: Optional[str] = None) -> None:
        super().__init__(
            message=f"'{name}' already exists",
            name=name,
            path=path,
            error_code=4002
        )


class DirectoryNotEmptyError(NamespaceError):
    """
    Non-recursive removal of a populated directory.

    Example:
        >>> raise DirectoryNotEmptyError("logs", path="/var/logs", entries=3)
    """

    kind = "NotEmpty"

    def __init__(
        self,
        name: str,
        path: Optional[str] = None,
        entries: Optional[int] = None
    ) -> None:
        ctx = {}
        if entries is not None:
            ctx["entries"] = entries
        super().__init__(
            message=f"Directory not empty: '{name}'",
            name=name,
            path=path,
            error_code=4004,
            context=ctx
        )
        self.entries = entries


class NotAFileError(NamespaceError):
    """A file operation was attempted on a directory."""

    kind = "NotAFile"

    def __init__(self, name: str, path: Optional[str] = None) -> None:
        super().__init__(
            message=f"'{name}' is not a file",
            name=name,
            path=path,
            error_code=4008,
            context={"actual_type": "directory"}
        )


class NotADirectoryError(NamespaceError):
    """A directory was expected, mid-traversal or at the target."""

    kind = "NotADirectory"

    def __init__(self, name: str, path: Optional[str] = None) -> None:
        super().__init__(
            message=f"'{name}' is not a directory",
            name=name,
            path=path,
            error_code=4009
        )


class InvalidPermissionFormatError(NamespaceError):
    """
    A permission string is neither 3 octal digits nor 9 symbolic characters.

    Example:
        >>> raise InvalidPermissionFormatError("999")
    """

    kind = "InvalidPermissionFormat"

    def __init__(self, mode: str) -> None:
        super().__init__(
            message=f"Invalid permission format: '{mode}'",
            name=mode,
            error_code=4010
        )
        self.mode = mode


class InvalidPatternError(NamespaceError):
    """A search pattern could not be compiled."""

    kind = "InvalidPattern"

    def __init__(self, pattern: str, reason: Optional[str] = None) -> None:
        ctx = {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid pattern: '{pattern}'",
            name=pattern,
            error_code=4011,
            context=ctx
        )
        self.pattern = pattern
        self.reason = reason


class NoParentError(NamespaceError):
    """The root directory has no parent."""

    kind = "NoParent"

    def __init__(self, path: str = "/") -> None:
        super().__init__(
            message="The root directory has no parent",
            path=path,
            error_code=4012
        )


class PersistenceError(NamespaceError):
    """
    Saving the namespace to its key-value store failed.

    Raised by the persistence adapter; the engine logs it and keeps the
    in-memory tree as the source of truth.
    """

    kind = "PersistenceError"

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        ctx = {}
        if key:
            ctx["key"] = key
        if cause is not None:
            ctx["cause"] = type(cause).__name__
        super().__init__(
            message=message,
            error_code=4020,
            context=ctx
        )
        self.key = key
        self.cause = cause
