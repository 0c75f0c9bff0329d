"""Dotted-numeric version comparison.

PEP 440 versions are compared with :mod:`packaging`.  Anything packaging
refuses (distro suffixes such as ``7.4.3-1ubuntu1``, empty strings) falls
back to comparing the leading numeric segments, so a malformed version
yields a possibly wrong answer but never an exception.
"""
from __future__ import annotations

import logging
import re
from itertools import zip_longest

from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)

_LEADING_NUMERIC = re.compile(r"^\s*v?(\d+(?:\.\d+)*)")


def _numeric_segments(version: str) -> tuple[int, ...]:
    """Extract the leading dotted numeric run of *version*, or ``(0,)``."""
    match = _LEADING_NUMERIC.match(version or "")
    if match is None:
        return (0,)
    return tuple(int(part) for part in match.group(1).split("."))


def _lenient_at_least(current: str, required: str) -> bool:
    for have, want in zip_longest(
        _numeric_segments(current), _numeric_segments(required), fillvalue=0
    ):
        if have != want:
            return have > want
    return True


def is_version_at_least(current: str, required: str) -> bool:
    """Return True when *current* is greater than or equal to *required*.

    Missing trailing segments count as zero, so ``"7.2"`` equals ``"7.2.0"``
    (PHP's ``version_compare`` would rank ``"7.2"`` lower).

    Args:
        current: The version that is actually present.
        required: The minimum acceptable version.

    Returns:
        Whether *current* satisfies the minimum.
    """
    try:
        return Version(str(current)) >= Version(str(required))
    except InvalidVersion:
        logger.debug(
            "Non-PEP 440 version in comparison (%r >= %r), using numeric prefix",
            current,
            required,
        )
        return _lenient_at_least(str(current), str(required))
