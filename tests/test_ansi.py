"""Tests for tablewrap.ansi -- style-aware segmentation."""

from __future__ import annotations

from tablewrap.ansi import (
    Span,
    StyleTracker,
    extract_hyperlink,
    hyperlink_prefix_suffix,
    segment,
)


# ---------------------------------------------------------------------------
# StyleTracker
# ---------------------------------------------------------------------------


class TestStyleTracker:
    """Active SGR state and the codes to re-open or close it."""

    def test_starts_without_codes(self) -> None:
        tracker = StyleTracker()
        assert not tracker.has_active_codes()
        assert tracker.get_active_codes() == ""
        assert tracker.get_close_codes() == ""

    def test_combined_params(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[1;31m")
        assert tracker.get_active_codes() == "\x1b[1m\x1b[31m"
        assert tracker.get_close_codes() == "\x1b[22m\x1b[39m"

    def test_bold_and_dim_share_one_reset(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[1m")
        tracker.process("\x1b[2m")
        assert tracker.get_close_codes() == "\x1b[22m"

    def test_reset_clears_everything(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[4;44m")
        tracker.process("\x1b[0m")
        assert not tracker.has_active_codes()

    def test_empty_params_reset(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[3m")
        tracker.process("\x1b[m")
        assert not tracker.has_active_codes()

    def test_256_color(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[38;5;208m")
        assert tracker.get_active_codes() == "\x1b[38;5;208m"
        assert tracker.get_close_codes() == "\x1b[39m"

    def test_rgb_background(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[48;2;12;200;100m")
        assert tracker.get_active_codes() == "\x1b[48;2;12;200;100m"
        assert tracker.get_close_codes() == "\x1b[49m"

    def test_targeted_reset(self) -> None:
        tracker = StyleTracker()
        tracker.process("\x1b[1;31m")
        tracker.process("\x1b[39m")
        assert tracker.get_active_codes() == "\x1b[1m"


# ---------------------------------------------------------------------------
# segment
# ---------------------------------------------------------------------------


class TestSegment:
    """Split styled text into spans of constant style."""

    def test_plain_text_is_one_unstyled_span(self) -> None:
        assert segment("plain") == [Span("plain")]

    def test_empty_text(self) -> None:
        assert segment("") == []

    def test_single_styled_run(self) -> None:
        assert segment("\x1b[37mHello World\x1b[0m") == [
            Span("Hello World", "\x1b[37m", "\x1b[39m")
        ]

    def test_repeated_style_is_merged(self) -> None:
        assert segment("\x1b[37mHello Wo\x1b[37mrld\x1b[0m") == [
            Span("Hello World", "\x1b[37m", "\x1b[39m")
        ]

    def test_mixed_runs(self) -> None:
        text = "\x1b[31mred\x1b[0m plain \x1b[1;44mbold\x1b[0m"
        assert segment(text) == [
            Span("red", "\x1b[31m", "\x1b[39m"),
            Span(" plain "),
            Span("bold", "\x1b[1m\x1b[44m", "\x1b[22m\x1b[49m"),
        ]

    def test_blink_and_colors(self) -> None:
        text = "\x1b[5m\x1b[48;2;12;200;100m\x1b[33mC\x1b[0m"
        assert segment(text) == [
            Span(
                "C",
                "\x1b[5m\x1b[33m\x1b[48;2;12;200;100m",
                "\x1b[25m\x1b[39m\x1b[49m",
            )
        ]

    def test_partial_reset_starts_new_span(self) -> None:
        text = "\x1b[1;31mab\x1b[39mcd\x1b[0m"
        assert segment(text) == [
            Span("ab", "\x1b[1m\x1b[31m", "\x1b[22m\x1b[39m"),
            Span("cd", "\x1b[1m", "\x1b[22m"),
        ]

    def test_runs_without_text_are_skipped(self) -> None:
        assert segment("\x1b[31m\x1b[0m") == []

    def test_non_sgr_sequences_are_dropped(self) -> None:
        assert segment("a\x1b[2Kb") == [Span("ab")]


# ---------------------------------------------------------------------------
# Hyperlinks
# ---------------------------------------------------------------------------


class TestHyperlinks:
    def test_extract_with_st(self) -> None:
        text = "\x1b]8;;https://example.com\x1b\\link\x1b]8;;\x1b\\"
        assert extract_hyperlink(text) == ("link", "https://example.com")

    def test_extract_with_bel(self) -> None:
        text = "\x1b]8;;https://example.com\x07link\x1b]8;;\x07"
        assert extract_hyperlink(text) == ("link", "https://example.com")

    def test_extract_keeps_styles(self) -> None:
        text = "\x1b]8;;http://x\x07\x1b[31mab\x1b[0m\x1b]8;;\x07"
        assert extract_hyperlink(text) == ("\x1b[31mab\x1b[0m", "http://x")

    def test_no_link(self) -> None:
        assert extract_hyperlink("plain") == ("plain", None)

    def test_prefix_suffix(self) -> None:
        assert hyperlink_prefix_suffix("http://x") == (
            "\x1b]8;;http://x\x1b\\",
            "\x1b]8;;\x1b\\",
        )

    def test_prefix_suffix_without_link(self) -> None:
        assert hyperlink_prefix_suffix(None) == ("", "")
