"""Exclusion of operations by regular expression.

Pattern flags use JavaScript RegExp letters so that existing codegen
configs keep working:

    i  ignore case          m  multiline
    s  dot matches newline  y  sticky (anchored at the start)
    u, v  unicode (always on)
    g, d  no effect on a single test
"""

import logging
import re
from functools import lru_cache
from typing import Callable

from .exceptions import InvalidPatternError

logger = logging.getLogger(__name__)

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "v": 0,
    "g": 0,
    "d": 0,
    "y": 0,
}


@lru_cache(maxsize=32)
def compile_exclusion(pattern: str, flags: str = "") -> Callable[[str], bool]:
    """Compile an exclusion pattern into a predicate over operation names.

    Raises:
        InvalidPatternError: If the flags are unknown or repeated, or the
            pattern does not compile.
    """
    re_flags = 0
    for letter in flags:
        if letter not in _FLAG_MAP:
            raise InvalidPatternError(pattern, flags, f"unknown flag {letter!r}")
        if flags.count(letter) > 1:
            raise InvalidPatternError(pattern, flags, f"repeated flag {letter!r}")
        re_flags |= _FLAG_MAP[letter]

    try:
        regex = re.compile(pattern, re_flags)
    except re.error as e:
        raise InvalidPatternError(pattern, flags, str(e)) from e

    if "y" in flags:
        return lambda name: regex.match(name) is not None
    return lambda name: regex.search(name) is not None


def should_exclude(name: str, pattern: str | None, flags: str = "") -> bool:
    """Return True if the operation `name` matches the exclusion pattern.

    Without a pattern nothing is excluded.
    """
    if not pattern:
        return False
    excluded = compile_exclusion(pattern, flags or "")(name)
    if excluded:
        logger.debug("Excluding operation %s (pattern %r)", name, pattern)
    return excluded
