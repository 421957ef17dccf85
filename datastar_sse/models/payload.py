"""Payload value types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextRef:
    """
    間接傳入的單一文字區塊.

    Passing ``TextRef(html)`` instead of ``html`` marks the value as one block
    of text even when it sits inside a list of other blocks.
    """

    text: str

    def __str__(self) -> str:
        return self.text
