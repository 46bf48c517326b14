"""
Permission Codec

Conversion between octal ("755") and symbolic ("rwxr-xr-x") permission
strings, with validation of both forms.

Author: YSNRFD
Version: 1.0.0
"""

import re

from vos.exceptions import InvalidPermissionFormatError


DEFAULT_DIR_PERMISSIONS = 'rwxr-xr-x'
DEFAULT_FILE_PERMISSIONS = 'rw-r--r--'

_OCTAL_RE = re.compile(r'^[0-7]{3}$')
_SYMBOLIC_RE = re.compile(r'^[rwx-]{9}$')

# (bit, letter) per position within one owner/group/other triplet
_BITS = ((4, 'r'), (2, 'w'), (1, 'x'))


class PermissionCodec:
    """
    Octal and symbolic permission conversions.

    Example:
        >>> PermissionCodec.octal_to_symbolic('644')
        'rw-r--r--'
    """

    @staticmethod
    def validate_octal(mode: str) -> bool:
        """Exactly three digits, each 0-7."""
        return isinstance(mode, str) and _OCTAL_RE.fullmatch(mode) is not None

    @staticmethod
    def validate_symbolic(mode: str) -> bool:
        """Exactly nine characters drawn from r, w, x and -."""
        return isinstance(mode, str) and _SYMBOLIC_RE.fullmatch(mode) is not None

    @staticmethod
    def octal_to_symbolic(digits: str) -> str:
        """
        Convert a 3-digit octal string to its symbolic form.

        Raises:
            InvalidPermissionFormatError: If ``digits`` is not valid octal
        """
        if not PermissionCodec.validate_octal(digits):
            raise InvalidPermissionFormatError(str(digits))

        groups = []
        for digit in digits:
            value = int(digit)
            groups.append(''.join(
                letter if value & bit else '-' for bit, letter in _BITS
            ))
        return ''.join(groups)

    @staticmethod
    def symbolic_to_octal(mode: str) -> str:
        """
        Convert a 9-character symbolic string to 3 octal digits.

        Each position is tested against the letter expected there, so
        ``"wr-------"`` is rejected.
        """
        if not PermissionCodec.validate_symbolic(mode):
            raise InvalidPermissionFormatError(str(mode))

        digits = []
        for start in range(0, 9, 3):
            group = mode[start:start + 3]
            value = 0
            for char, (bit, letter) in zip(group, _BITS):
                if char == letter:
                    value |= bit
                elif char != '-':
                    raise InvalidPermissionFormatError(mode)
            digits.append(str(value))
        return ''.join(digits)

    @staticmethod
    def normalize(mode: str) -> str:
        """
        Accept either form and return the symbolic one.

        Raises:
            InvalidPermissionFormatError: If ``mode`` is in neither form
        """
        if PermissionCodec.validate_octal(mode):
            return PermissionCodec.octal_to_symbolic(mode)
        if PermissionCodec.validate_symbolic(mode):
            return mode
        raise InvalidPermissionFormatError(str(mode))
