import pytest

from chronicle.utils.text import format_word_list


@pytest.mark.parametrize(
    ("words", "quote", "expected"),
    [
        ([], "'", ""),
        (["closed"], "'", "'closed'"),
        (["closed", "abandoned"], "'", "'closed' or 'abandoned'"),
        (["a", "b", "c"], '"', '"a", "b", or "c"'),
    ],
)
def test_format_word_list(words, quote, expected):
    assert format_word_list(words, quote) == expected
