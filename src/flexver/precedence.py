# SPDX-License-Identifier: MIT
"""Precedence rules for version segments and pre-release identifiers.

Pre-release identifiers are compared token by token. When one identifier is
a prefix of the other, the missing token counts as "" and:
- loses to a numeric token:      beta < beta.3
- beats a non-numeric token:     alpha > alpha.beta
Differing non-empty tokens compare as plain strings, so "9" > "10".
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Sequence

# Tokens that read as a signed 64-bit integer count as numeric
_NUMERIC_TOKEN = re.compile(r"-?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_DIGITS = len(str(_INT64_MAX))


def is_numeric_token(token: str) -> bool:
    """Return True if a pre-release token is a signed 64-bit integer."""
    if not _NUMERIC_TOKEN.fullmatch(token):
        return False
    if len(token.lstrip("-").lstrip("0")) > _INT64_DIGITS:
        return False
    return _INT64_MIN <= int(token) <= _INT64_MAX


def compare_segments(segments1: Sequence[int], segments2: Sequence[int]) -> int:
    """Compare segment sequences numerically, left to right."""
    for val1, val2 in zip(segments1, segments2):
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def compare_prerelease_tokens(token1: str, token2: str) -> int:
    """Compare a single pair of pre-release tokens.

    Returns:
        -1 if token1 < token2
        0 if token1 == token2
        1 if token1 > token2
    """
    if token1 == token2:
        return 0

    # An empty slot takes its order from the token it is compared against
    if token1 == "":
        return -1 if is_numeric_token(token2) else 1
    if token2 == "":
        return 1 if is_numeric_token(token1) else -1

    return 1 if token1 > token2 else -1


def compare_prereleases(pre1: str, pre2: str) -> int:
    """Compare two non-empty pre-release strings.

    Examples:
        >>> compare_prereleases("beta.1", "beta.2")
        -1
        >>> compare_prereleases("beta", "beta.3")
        -1
        >>> compare_prereleases("alpha", "alpha.beta")
        1
    """
    if pre1 == pre2:
        return 0

    tokens = itertools.zip_longest(pre1.split("."), pre2.split("."), fillvalue="")
    for token1, token2 in tokens:
        result = compare_prerelease_tokens(token1, token2)
        if result != 0:
            return result
    return 0
