import math

from blog.services.excerpt import calculate_reading_time, generate_excerpt


def test_generate_excerpt_takes_first_paragraph():
    content = "First paragraph here.\n\nSecond paragraph."

    assert generate_excerpt(content) == "First paragraph here."


def test_generate_excerpt_strips_inline_markup():
    content = (
        "## A **bold** and *italic* take on [links](https://example.com)\n"
        "with `code` inline.\n\nNext."
    )

    assert (
        generate_excerpt(content)
        == "A bold and italic take on links with code inline."
    )


def test_generate_excerpt_strips_leftover_front_matter():
    content = "---\ntitle: Hi\n---\n\nActual opening line."

    assert generate_excerpt(content) == "Actual opening line."


def test_generate_excerpt_skips_blank_paragraphs():
    assert generate_excerpt("\n\n   \n\nLate start.") == "Late start."


def test_generate_excerpt_empty_content():
    assert generate_excerpt("") == ""
    assert generate_excerpt("   \n\n  ") == ""


def test_generate_excerpt_is_idempotent():
    content = "# Title\n\nSome *text* with a [link](/x)."

    first = generate_excerpt(content)

    assert generate_excerpt(content) == first
    assert generate_excerpt(first) == first


def test_calculate_reading_time_rounds_up():
    assert calculate_reading_time("word " * 200) == 1
    assert calculate_reading_time("word " * 201) == 2
    assert calculate_reading_time("word " * 1000) == 5


def test_calculate_reading_time_matches_word_count_formula():
    content = "alpha beta\ngamma\tdelta " * 77

    assert calculate_reading_time(content) == math.ceil(len(content.split()) / 200)


def test_calculate_reading_time_at_least_one_minute():
    assert calculate_reading_time("Hello world.") == 1
    assert calculate_reading_time("") == 1
