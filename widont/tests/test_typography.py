"""Tests for widont.typography — widont, safe_to_filter and filter_content."""

from django.test import SimpleTestCase

from widont.typography import (
    NBSP,
    filter_content,
    find_elements,
    safe_to_filter,
    widont,
    widont_content,
)


# ── widont ───────────────────────────────────────────────────────────────────


class TestWidont(SimpleTestCase):
    """Tests for widont — last two words joined with &nbsp;."""

    def test_empty_string_unchanged(self) -> None:
        assert widont("") == ""

    def test_none_returns_empty_string(self) -> None:
        assert widont(None) == ""  # type: ignore[arg-type]

    def test_single_word_unchanged(self) -> None:
        assert widont("word") == "word"

    def test_leading_space_single_word_unchanged(self) -> None:
        assert widont(" Test") == " Test"

    def test_two_words(self) -> None:
        assert widont("a b") == f"a{NBSP}b"

    def test_only_last_separator_replaced(self) -> None:
        assert widont("a b c") == "a b&nbsp;c"

    def test_sentence(self) -> None:
        assert widont("A very simple test") == "A very simple&nbsp;test"

    def test_whitespace_run_collapsed(self) -> None:
        assert widont("one two  \t three") == "one two&nbsp;three"

    def test_trailing_whitespace_ignored(self) -> None:
        assert widont("The quick fox   ") == "The quick&nbsp;fox"

    def test_newline_between_words(self) -> None:
        assert widont("hello\nworld") == "hello&nbsp;world"

    def test_text_before_last_two_words_untouched(self) -> None:
        text = "  lots   of   space before the end"
        assert widont(text) == "  lots   of   space before the&nbsp;end"

    def test_existing_joiner_in_last_token_unchanged(self) -> None:
        assert widont("Tom and&nbsp;Jerry") == "Tom and&nbsp;Jerry"

    def test_idempotent(self) -> None:
        for text in ["", "word", "a b", "a b c", "The quick brown fox  ", " x"]:
            with self.subTest(text=text):
                once = widont(text)
                assert widont(once) == once


# ── safe_to_filter ───────────────────────────────────────────────────────────


class TestSafeToFilter(SimpleTestCase):
    """Tests for safe_to_filter — embedded/executable markup is off limits."""

    def test_plain_paragraph_is_safe(self) -> None:
        assert safe_to_filter("<p>hello</p>") is True

    def test_empty_is_safe(self) -> None:
        assert safe_to_filter("") is True

    def test_nested_iframe_is_unsafe(self) -> None:
        assert safe_to_filter("<p><iframe src=x></iframe></p>") is False

    def test_every_unsafe_tag(self) -> None:
        for tag in ["iframe", "script", "style", "embed", "object", "video", "audio"]:
            with self.subTest(tag=tag):
                assert safe_to_filter(f"<p>text <{tag}>x</{tag}></p>") is False

    def test_closing_tag_alone_is_safe(self) -> None:
        assert safe_to_filter("<p>text</script></p>") is True

    def test_case_sensitive(self) -> None:
        assert safe_to_filter("<p><IFRAME src=x></IFRAME></p>") is True

    def test_tag_name_in_text_is_safe(self) -> None:
        assert safe_to_filter("<p>the script ran</p>") is True


# ── find_elements ────────────────────────────────────────────────────────────


class TestFindElements(SimpleTestCase):
    """Tests for find_elements — linear scan for configured elements."""

    def test_offsets(self) -> None:
        content = "x<p>ab</p>y"
        (span,) = list(find_elements(content, ["p"]))
        assert span.name == "p"
        assert content[span.start:span.end] == "<p>ab</p>"
        assert content[span.inner_start:span.inner_end] == "ab"

    def test_left_to_right_across_tags(self) -> None:
        content = "<h3>one</h3><p>two</p><h3>three</h3>"
        names = [span.name for span in find_elements(content, ["p", "h3"])]
        assert names == ["h3", "p", "h3"]

    def test_nearest_closing_tag_ends_match(self) -> None:
        content = "<li>a <li>b</li> c</li>"
        (span,) = list(find_elements(content, ["li"]))
        assert content[span.start:span.end] == "<li>a <li>b</li>"

    def test_nested_opener_not_balanced(self) -> None:
        content = "<p>open <p>closed</p>"
        spans = list(find_elements(content, ["p"]))
        assert [content[s.start:s.end] for s in spans] == ["<p>open <p>closed</p>"]

    def test_unclosed_other_tag_does_not_stop_scan(self) -> None:
        content = "<h3>dangling <p>closed text</p>"
        spans = list(find_elements(content, ["h3", "p"]))
        assert [content[s.start:s.end] for s in spans] == ["<p>closed text</p>"]

    def test_attributes_not_matched(self) -> None:
        assert list(find_elements('<p class="lead">a b</p>', ["p"])) == []

    def test_no_tags(self) -> None:
        assert list(find_elements("<p>a b</p>", [])) == []

    def test_unclosed_name_dropped_from_scan(self) -> None:
        content = _CountingStr("<p>x " * 50000)
        assert list(find_elements(content, ["p", "h3"])) == []
        assert content.find_calls == 1

    def test_other_names_still_found_after_unclosed_one(self) -> None:
        content = "<h3>one</h3><p>dangling <h3>two words</h3> <p>more"
        spans = list(find_elements(content, ["p", "h3"]))
        assert [content[s.start:s.end] for s in spans] == [
            "<h3>one</h3>",
            "<h3>two words</h3>",
        ]


class _CountingStr(str):
    """A str that counts calls to ``find``."""

    def find(self, *args):
        self.find_calls = getattr(self, "find_calls", 0) + 1
        return super().find(*args)


# ── filter_content ───────────────────────────────────────────────────────────


class TestFilterContent(SimpleTestCase):
    """Tests for filter_content — tag-scoped widow prevention."""

    def test_empty_tag_set_returns_input(self) -> None:
        content = "<p>a b c</p>"
        assert filter_content(content, []) is content
        assert filter_content(content, "") is content

    def test_empty_content(self) -> None:
        assert filter_content("", ["p"]) == ""

    def test_joiner_inside_element(self) -> None:
        assert filter_content("<p>a b c</p>", ["p"]) == "<p>a b&nbsp;c</p>"

    def test_trailing_space_before_closing_tag(self) -> None:
        assert filter_content("<p>a b c </p>", ["p"]) == "<p>a b&nbsp;c</p>"

    def test_unsafe_element_untouched(self) -> None:
        content = "<p><iframe>x y</iframe></p>"
        assert filter_content(content, ["p"]) == content

    def test_unconfigured_elements_untouched(self) -> None:
        content = "<p>The quick brown fox</p><div>ignored text here</div>"
        assert filter_content(content, ["p"]) == (
            "<p>The quick brown&nbsp;fox</p><div>ignored text here</div>"
        )

    def test_multiple_configured_tags(self) -> None:
        content = "<h3>A short heading</h3><p>Some body text</p>"
        assert filter_content(content, ["p", "h3"]) == (
            "<h3>A short&nbsp;heading</h3><p>Some body&nbsp;text</p>"
        )

    def test_pipe_delimited_tags(self) -> None:
        assert filter_content("<h4>x y</h4>", "p|h4") == "<h4>x&nbsp;y</h4>"

    def test_duplicate_fragments_each_rewritten_once(self) -> None:
        content = "<p>same text here</p><hr><p>same text here</p>"
        assert filter_content(content, ["p"]) == (
            "<p>same text&nbsp;here</p><hr><p>same text&nbsp;here</p>"
        )

    def test_safe_and_unsafe_mixed(self) -> None:
        content = "<p>keep <script>a b</script></p><p>fix this one</p>"
        assert filter_content(content, ["p"]) == (
            "<p>keep <script>a b</script></p><p>fix this&nbsp;one</p>"
        )

    def test_inline_markup_inside_element(self) -> None:
        content = "<p>read <em>the</em> docs</p>"
        assert filter_content(content, ["p"]) == "<p>read <em>the</em>&nbsp;docs</p>"

    def test_multiline_element(self) -> None:
        content = "<p>first line\nsecond line</p>"
        assert filter_content(content, ["p"]) == "<p>first line\nsecond&nbsp;line</p>"

    def test_large_unclosed_content_unchanged(self) -> None:
        content = "<p>x " * 50000
        assert filter_content(content, ["p", "h3"]) is content

    def test_inline_tag_in_last_words_is_joined_inside_tag(self) -> None:
        # Tag characters count as word characters.
        content = '<p>Read <a href="x">this</a></p>'
        assert filter_content(content, ["p"]) == '<p>Read <a&nbsp;href="x">this</a></p>'

    def test_single_word_element_unchanged(self) -> None:
        content = "<p>Hello</p>"
        assert filter_content(content, ["p"]) == content

    def test_malformed_markup_unchanged(self) -> None:
        content = "<p>never closed text"
        assert filter_content(content, ["p"]) == content

    def test_idempotent(self) -> None:
        once = filter_content("<p>a b c</p><p>d e</p>", ["p"])
        assert filter_content(once, ["p"]) == once


# ── widont_content ───────────────────────────────────────────────────────────


class TestWidontContentPostprocessor(SimpleTestCase):
    """Tests for widont_content with tags already in the render context."""

    def test_uses_context_tags(self) -> None:
        context = {"widont_tags": ["h2"]}
        html = "<h2>Title goes here</h2><p>not this one</p>"
        assert widont_content(html, context) == (
            "<h2>Title goes&nbsp;here</h2><p>not this one</p>"
        )

    def test_empty_context_tags_leaves_content(self) -> None:
        html = "<p>a b c</p>"
        assert widont_content(html, {"widont_tags": []}) == html
