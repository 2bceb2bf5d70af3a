from blog.utils import calculate_reading_time, format_display_date, truncate_excerpt


def test_format_display_date():
    assert format_display_date("2024-01-01") == "JAN 1, 2024"
    assert format_display_date("2023-12-25T10:00:00") == "DEC 25, 2023"


def test_format_display_date_passes_through_unparseable():
    assert format_display_date("someday") == "someday"
    assert format_display_date(None) == ""


def test_truncate_excerpt():
    assert truncate_excerpt("short") == "short"
    assert truncate_excerpt("x" * 150) == "x" * 150
    assert truncate_excerpt("x" * 151) == "x" * 150 + "..."
    assert truncate_excerpt(None) == ""


def test_calculate_reading_time_returns_minutes():
    assert calculate_reading_time("one two three") == 1
