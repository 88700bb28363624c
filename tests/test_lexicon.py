from pathlib import Path

import pytest

from spelint.lexicon import iter_lexicon, load_lexicon, parse_counted_line, parse_ranked_line


def test_parse_counted_line_accepts_grouped_counts() -> None:
    assert parse_counted_line("the 23,135,851") == ("the", 23135851)
    assert parse_counted_line("Hello 12") == ("hello", 12)


def test_parse_counted_line_rejects_malformed_lines() -> None:
    assert parse_counted_line("word") is None
    assert parse_counted_line("word many") is None
    assert parse_counted_line("42 7") is None


def test_iter_lexicon_counted_skips_bad_lines() -> None:
    lines = ["the 10", "", "broken", "of 4"]

    assert list(iter_lexicon(lines)) == [("the", 10), ("of", 4)]


def test_iter_lexicon_ranked_assigns_descending_frequencies() -> None:
    lines = ["the", "of", "and"]

    assert list(iter_lexicon(lines, mode="ranked")) == [("the", 3), ("of", 2), ("and", 1)]
    assert list(iter_lexicon(lines, mode="ranked", limit=2)) == [("the", 2), ("of", 1)]


def test_iter_lexicon_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        list(iter_lexicon(["the 1"], mode="weighted"))


def test_load_lexicon_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("hello 100\nhelp 90\nhell 70\n", encoding="utf-8")

    assert load_lexicon(path) == [("hello", 100), ("help", 90), ("hell", 70)]


def test_counted_and_ranked_lines_share_word_rules() -> None:
    assert parse_ranked_line("  Hello  ") == "hello"
    assert parse_ranked_line("don't") is None
    assert parse_counted_line("don't 5") is None
    assert parse_counted_line("the ²") is None
    assert parse_ranked_line("") is None
