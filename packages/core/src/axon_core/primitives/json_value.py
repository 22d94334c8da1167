"""Comparison of JSON values by JSON rules rather than Python ones."""

from __future__ import annotations

from typing import Any


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality where a JSON boolean never equals a number.

    Python treats ``True == 1``; JSON does not. Objects compare without
    regard to key order, arrays element by element.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, dict):
        if not isinstance(right, dict) or left.keys() != right.keys():
            return False
        return all(json_equal(value, right[key]) for key, value in left.items())
    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    if isinstance(right, (dict, list)):
        return False
    return bool(left == right)
