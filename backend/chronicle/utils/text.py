from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def format_word_list(words: Sequence[str], quote: str = "'") -> str:
    """Join words for display, quoted, with an "or" before the last one.

    Examples:
        ["closed"] -> 'closed'
        ["closed", "abandoned"] -> 'closed' or 'abandoned'
        ["a", "b", "c"] with quote '"' -> "a", "b", or "c"
    """
    quoted = [f"{quote}{w}{quote}" for w in words]
    if not quoted:
        return ""
    if len(quoted) == 1:
        return quoted[0]
    if len(quoted) == 2:
        return f"{quoted[0]} or {quoted[1]}"
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
