import re

from feedreader.identifiers import generate_id

ID_PATTERN = re.compile(r"^[a-z0-9]{8,16}$")


def test_known_values() -> None:
    assert generate_id("a", "") == "0000002p"
    assert generate_id("a", "b") == "000002e9"


def test_same_inputs_same_id() -> None:
    first = generate_id("Consistent Article", "https://example.com/consistent")
    second = generate_id("Consistent Article", "https://example.com/consistent")
    assert first == second
    assert ID_PATTERN.match(first)


def test_different_links_differ() -> None:
    assert generate_id("Same", "https://a.example") != generate_id("Same", "https://b.example")


def test_unicode_and_surrogate_pairs() -> None:
    title = "Article with Unicode: 你好世界 🌍"
    link = "https://example.com/unicode/你好"
    value = generate_id(title, link)
    assert value == generate_id(title, link)
    assert ID_PATTERN.match(value)


def test_emoji_hashes_by_code_unit() -> None:
    # U+1F30D is the surrogate pair D83C DF0D: 0xD83C * 31 + 0xDF0D == 1773137.
    assert generate_id("🌍", "") == "0001205t"


def test_long_input_wraps_to_32_bits() -> None:
    value = generate_id("x" * 10_000, "https://example.com/" + "y" * 5_000)
    assert ID_PATTERN.match(value)


def test_empty_input() -> None:
    assert generate_id("", "") == "00000000"
