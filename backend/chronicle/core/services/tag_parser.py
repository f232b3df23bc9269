from __future__ import annotations

import re

from chronicle.core.models.tag import TagOccurrence

# A token runs from '[' to the first ']'. The head (type and identifier) stops at
# the first '|'; the optional data section follows it. Neither part may contain
# a '[', so an unterminated bracket gives way to the next one.
TAG_PATTERN = re.compile(r"\[(?P<head>[^\[\]|]*)(?:\|(?P<data>[^\[\]]*))?\]")


def parse_tags(text: str | None) -> list[TagOccurrence]:
    """Extract every well-formed `[type:identifier | data]` tag from text.

    Occurrences are returned in source order with surrounding whitespace trimmed
    from each field. Bracketed text without a ':' (dice breakdowns such as
    `[3 4]`), with an empty type or identifier, or without a closing ']' is not
    a tag and is skipped.
    """
    if not text:
        return []

    occurrences: list[TagOccurrence] = []
    for match in TAG_PATTERN.finditer(text):
        type_code, sep, identifier = match.group("head").partition(":")
        if not sep:
            continue
        type_code = type_code.strip()
        identifier = identifier.strip()
        if not type_code or not identifier:
            continue
        occurrences.append(
            TagOccurrence(
                type_code=type_code,
                identifier=identifier,
                data=(match.group("data") or "").strip(),
                raw_text=match.group(0),
            )
        )
    return occurrences
