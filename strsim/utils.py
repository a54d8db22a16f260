"""
strsim.utils — optional string preprocessing.

Nothing here is applied implicitly: metrics compare scalar values exactly as
given. Pass ``processor=default_process`` to opt in.
"""

from __future__ import annotations

from typing import Any


def default_process(sentence: Any) -> str:
    """Lowercase *sentence*, replace non-alphanumeric characters with spaces
    and trim surrounding whitespace.

    ``None`` is turned into the empty string.

    >>> default_process("Hello, World!")
    'hello  world'
    """
    if sentence is None:
        return ""
    text = "".join(ch if ch.isalnum() else " " for ch in str(sentence))
    return text.lower().strip()


__all__ = ["default_process"]
