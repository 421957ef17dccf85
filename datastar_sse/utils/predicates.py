"""輸入型別判斷工具.

用來決定呼叫端傳入的是單一值還是多個值，以及單一文字是否以間接參考傳入。
所有判斷都不會拋出例外，無法辨識的型別一律回傳 False。
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from ..models.payload import TextRef


_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def is_array_like(value: Any) -> bool:
    """Whether ``value`` is an ordered collection of items (not text, not a mapping)."""
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Sequence)


def is_scalar_ref(value: Any) -> bool:
    """Whether ``value`` is an indirect reference to a single text value."""
    return isinstance(value, TextRef)


def is_int_like(value: Any) -> bool:
    """
    Whether ``value`` is a base-10 integer.

    bool 雖然是 int 的子類別，但不視為整數。

    Examples:
        >>> is_int_like(300)
        True
        >>> is_int_like("-12")
        True
        >>> is_int_like("1.5")
        False
        >>> is_int_like(True)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return bool(_INT_PATTERN.match(value.strip()))
    return False
