"""
Glob-lite name patterns for find.

``*`` matches any run of characters and ``?`` exactly one. Other
characters go to the regular expression as written unless ``literal`` is
set, in which case they only match themselves.

Author: YSNRFD
Version: 1.0.0
"""

import re
from typing import Pattern

from vos.exceptions import InvalidPatternError


def glob_to_regex(pattern: str, literal: bool = False) -> str:
    """Translate a glob-lite pattern to an anchored regular expression."""
    if literal:
        body = ''.join(
            '.*' if char == '*' else '.' if char == '?' else re.escape(char)
            for char in pattern
        )
    else:
        body = pattern.replace('*', '.*').replace('?', '.')
    return f'^{body}$'


def compile_pattern(pattern: str, literal: bool = False) -> Pattern[str]:
    """
    Compile a glob-lite pattern.

    Raises:
        InvalidPatternError: If the resulting expression does not compile
    """
    try:
        return re.compile(glob_to_regex(pattern, literal=literal), re.DOTALL)
    except re.error as e:
        raise InvalidPatternError(pattern, reason=str(e)) from e
