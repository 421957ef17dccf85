"""JSON 與布林值輸出工具."""

import dataclasses
import json
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel


def _to_jsonable(obj: Any) -> Any:
    """Fallback conversion for values the stock encoder does not understand."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


@lru_cache(maxsize=None)
def get_json_encoder() -> json.JSONEncoder:
    """Shared compact encoder, built on first use."""
    return json.JSONEncoder(
        ensure_ascii=False,
        separators=(",", ":"),
        default=_to_jsonable,
    )


@lru_cache(maxsize=None)
def get_json_decoder() -> json.JSONDecoder:
    """Shared decoder, built on first use."""
    return json.JSONDecoder()


def encode_json(value: Any) -> str:
    """
    Encode a structured value as compact JSON text.

    Examples:
        >>> encode_json({"count": 1})
        '{"count":1}'
    """
    return get_json_encoder().encode(value)


def decode_json(text: str) -> Any:
    """Decode JSON text produced by :func:`encode_json`."""
    return get_json_decoder().decode(text)


def bool_token(value: Any) -> str:
    """Render a flag as the lowercase token the Datastar client expects."""
    return "true" if value else "false"
