"""Version-constraint arbitration for merged dependency maps."""

from __future__ import annotations

import re
from itertools import zip_longest

__all__ = ["parse_version", "pick_newer_version"]

_LEADING_DIGITS = re.compile(r"\d+")


def parse_version(version: str) -> tuple[int, ...]:
    """Numeric segments of a version constraint.

    A single leading ``^`` or ``~`` is dropped. Each dot-separated segment
    contributes its leading digits, or 0 when it has none.
    """
    if version[:1] in ("^", "~"):
        version = version[1:]
    segments: list[int] = []
    for part in version.split("."):
        match = _LEADING_DIGITS.match(part.strip())
        segments.append(int(match.group()) if match else 0)
    return tuple(segments)


def pick_newer_version(a: str, b: str) -> str:
    """Return whichever constraint names the higher version.

    Segments are compared numerically and a missing trailing segment counts as
    0, so ``"1.0"`` and ``"1.0.0"`` tie. On a tie ``a`` is returned. The result
    is one of the two inputs unchanged, prefix included.
    """
    for left, right in zip_longest(parse_version(a), parse_version(b), fillvalue=0):
        if left != right:
            return a if left > right else b
    return a
