"""Tests for inline tag recognition."""

import pytest
from pydantic import ValidationError

from chronicle.core.models.tag import TagKey
from chronicle.core.services.tag_parser import parse_tags


class TestParseTags:

    def test_simple_tag(self):
        tags = parse_tags("[L:Entrance | Foreboding]")
        assert len(tags) == 1
        assert tags[0].type_code == "L"
        assert tags[0].identifier == "Entrance"
        assert tags[0].data == "Foreboding"
        assert tags[0].raw_text == "[L:Entrance | Foreboding]"

    def test_tag_without_data_section(self):
        tags = parse_tags("Met [N:Aldric] at the gate")
        assert len(tags) == 1
        assert tags[0].identifier == "Aldric"
        assert tags[0].data == ""
        assert tags[0].raw_text == "[N:Aldric]"

    def test_whitespace_trimmed_but_raw_text_verbatim(self):
        tags = parse_tags("[ PC : Kira the Bold  |  HP 5 ]")
        assert tags[0].type_code == "PC"
        assert tags[0].identifier == "Kira the Bold"
        assert tags[0].data == "HP 5"
        assert tags[0].raw_text == "[ PC : Kira the Bold  |  HP 5 ]"

    def test_data_may_contain_colons_semicolons_and_pipes(self):
        tags = parse_tags("[N:Skeleton 2 | HP: 3; Sword | rusty]")
        assert tags[0].identifier == "Skeleton 2"
        assert tags[0].data == "HP: 3; Sword | rusty"

    def test_occurrences_in_source_order(self):
        text = "Entered [L:Tavern | cozy].\nMet [N:Bartender | Friendly]. [Thread:Find the sword]"
        assert [t.key for t in parse_tags(text)] == [
            TagKey(type_code="L", identifier="Tavern"),
            TagKey(type_code="N", identifier="Bartender"),
            TagKey(type_code="Thread", identifier="Find the sword"),
        ]

    @pytest.mark.parametrize(
        "text",
        [
            "Rolled 1d6: [4]",
            "Rolled 3d6: [3 3 3]",
            "Rolled 4d6kh3: 9 [3 4 6] ([1])",
            "Attack: 1d20+5 = 18 [13]\nDamage: 2d6 = 7 [3 4]",
            "Result: [ 12 ]",
        ],
    )
    def test_dice_breakdowns_are_not_tags(self, text):
        assert parse_tags(text) == []

    @pytest.mark.parametrize(
        "text",
        [
            "[L:Tavern | cozy",  # unterminated
            "[Tavern | cozy]",  # no type separator
            "[:Tavern]",  # empty type
            "[L: | ]",  # empty identifier (unfilled template)
            "L:Tavern]",  # no opening bracket
        ],
    )
    def test_malformed_tokens_are_skipped(self, text):
        assert parse_tags(text) == []

    def test_unterminated_token_gives_way_to_next_bracket(self):
        tags = parse_tags("[L:Tavern | cozy [N:Bob | drunk]")
        assert len(tags) == 1
        assert tags[0].raw_text == "[N:Bob | drunk]"

    def test_mixed_dice_and_tags(self):
        content = (
            "Entered the dungeon [L:Dungeon | dark].\n"
            "Met [N:Skeleton | HP: 3].\n"
            "Attacked: 1d20+3 = 17 [14]\n"
            "Damage: 2d6 = 9 [4 5]"
        )
        labels = [t.key.label for t in parse_tags(content)]
        assert labels == ["L:Dungeon", "N:Skeleton"]

    def test_empty_and_none(self):
        assert parse_tags("") == []
        assert parse_tags(None) == []

    def test_occurrences_are_immutable(self):
        tag = parse_tags("[L:Gate]")[0]
        with pytest.raises(ValidationError):
            tag.identifier = "Other"

    def test_type_code_with_separator_does_not_collide(self):
        """Keys compare by parts, not by a joined string."""
        a = TagKey(type_code="A", identifier="B:C")
        b = TagKey(type_code="A:B", identifier="C")
        assert a != b
        assert len({a, b}) == 2
