"""Tests for snippet extraction around mentions."""

from __future__ import annotations

from notelink.services.snippet import extract_snippet


class TestExtractSnippet:
    """Test the context window around a span."""

    def test_words_before_and_after(self) -> None:
        snippet = extract_snippet("The wise wizard Gandalf cast a powerful spell", 16, 23, 3)
        assert "wizard" in snippet
        assert "Gandalf" in snippet
        assert "cast" in snippet
        assert snippet == "The wise wizard Gandalf cast a powerful..."

    def test_mention_at_start(self) -> None:
        assert extract_snippet("@Gandalf went home", 0, 8, 10) == "@Gandalf went home"

    def test_mention_at_end(self) -> None:
        assert extract_snippet("We met @Gandalf", 7, 15, 10) == "We met @Gandalf"

    def test_leading_ellipsis_when_truncated(self) -> None:
        content = "one two three four five @X six"
        assert extract_snippet(content, 24, 26, 2) == "...four five @X six"

    def test_ellipsis_on_both_sides(self) -> None:
        assert extract_snippet("a b c @X d e f", 6, 8, 1) == "...c @X d..."

    def test_zero_words_around(self) -> None:
        assert extract_snippet("a b c @X d e f", 6, 8, 0) == "...@X..."

    def test_negative_words_around_treated_as_zero(self) -> None:
        assert extract_snippet("a b c", 2, 3, -5) == "...b..."

    def test_span_inside_a_word_keeps_whole_word(self) -> None:
        assert extract_snippet("Ask (@Gandalf). Now", 5, 13, 1) == "Ask (@Gandalf). Now"

    def test_multi_word_mention(self) -> None:
        content = "We met @[Gandalf the Grey] at dawn"
        assert extract_snippet(content, 7, 26, 1) == "...met @[Gandalf the Grey] at..."

    def test_whitespace_collapses_to_single_spaces(self) -> None:
        content = "line one\n\nline @Two\tthree"
        assert extract_snippet(content, 15, 19, 10) == "line one line @Two three"

    def test_content_shorter_than_window(self) -> None:
        assert extract_snippet("hi @Sam", 3, 7, 50) == "hi @Sam"

    def test_out_of_range_indices_do_not_raise(self) -> None:
        assert extract_snippet("hello world", 50, 60, 3) == "hello world"
        assert extract_snippet("hello world", -10, -2, 3) == "hello world"

    def test_empty_and_blank_content(self) -> None:
        assert extract_snippet("", 0, 0, 5) == ""
        assert extract_snippet("   ", 0, 2, 5) == ""

    def test_default_window_is_ten_words(self) -> None:
        words = [f"w{i}" for i in range(30)]
        content = " ".join(words[:15] + ["@X"] + words[15:])
        start = content.index("@X")
        snippet = extract_snippet(content, start, start + 2)
        assert snippet == "..." + " ".join(words[5:15] + ["@X"] + words[15:25]) + "..."
