from datetime import datetime, timezone

from resumable.dir_struct import substr_now, substr_time


def test_time():
    before = datetime.now(timezone.utc)
    result = substr_now("{day}/{month}")
    after = datetime.now(timezone.utc)
    assert result in {
        f"{before.day}/{before.month}",
        f"{after.day}/{after.month}",
    }


def test_unknown_var():
    assert substr_now("test/{quake}") == "test/{quake}"


def test_all_parts_without_padding():
    moment = datetime(2023, 1, 5, 7, 9, tzinfo=timezone.utc)
    template = "{year}/{month}/{day}/{hour}/{minute}"
    assert substr_time(template, moment) == "2023/1/5/7/9"


def test_repeated_placeholders():
    moment = datetime(2021, 12, 31, 23, 59, tzinfo=timezone.utc)
    assert substr_time("{day}-{day}/{hour}", moment) == "31-31/23"


def test_empty_template():
    moment = datetime(2021, 12, 31, 23, 59, tzinfo=timezone.utc)
    assert substr_time("", moment) == ""