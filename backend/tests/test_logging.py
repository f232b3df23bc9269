import logging

from chronicle.utils.logging import ContextFormatter


def make_record(**extra):
    record = logging.LogRecord("chronicle.test", logging.INFO, __file__, 1, "Search completed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_extra_fields_appended():
    formatter = ContextFormatter("%(levelname)s %(message)s")
    line = formatter.format(make_record(game_id=1, matches=2))
    assert line == "INFO Search completed [game_id=1 matches=2]"


def test_plain_record_unchanged():
    formatter = ContextFormatter("%(levelname)s %(message)s")
    assert formatter.format(make_record()) == "INFO Search completed"
