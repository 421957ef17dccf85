"""Services package."""

from .datastar_sse import DatastarSSE, flatten_text

__all__ = ["DatastarSSE", "flatten_text"]
