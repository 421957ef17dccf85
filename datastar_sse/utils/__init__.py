"""Utils package."""

from .errors import APIError, ErrorCode, raise_error, log_error
from .predicates import is_array_like, is_scalar_ref, is_int_like
from .json_codec import encode_json, decode_json, bool_token
from .sse import format_sse_event, format_comment, sse_headers, split_lines, has_line_break

__all__ = [
    "APIError",
    "ErrorCode",
    "raise_error",
    "log_error",
    "is_array_like",
    "is_scalar_ref",
    "is_int_like",
    "encode_json",
    "decode_json",
    "bool_token",
    "format_sse_event",
    "format_comment",
    "sse_headers",
    "split_lines",
    "has_line_break",
]
