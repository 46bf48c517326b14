"""
Operation results returned by the namespace engine.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Any, Optional

from vos.exceptions import NamespaceError


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one engine call: a value on success, an error otherwise."""
    success: bool
    value: Any = None
    error: Optional[NamespaceError] = None

    @classmethod
    def ok(cls, value: Any = None) -> 'OperationResult':
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: NamespaceError) -> 'OperationResult':
        return cls(success=False, error=error)

    @property
    def kind(self) -> Optional[str]:
        """Error kind, e.g. ``"NotFound"``; None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the value, or raise the error of a failed result."""
        if not self.success:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.success
