# SPDX-License-Identifier: MIT
"""Unit tests for version string parsing."""

import logging

import pytest

from version_compare import (
    Manifest,
    Number,
    Ordering,
    Text,
    Version,
    as_version,
    compare,
    parse,
    tokenize,
)


class TestParse:
    """Tests for parse function."""

    @pytest.mark.parametrize(
        "source,count",
        [
            ("1", 1),
            ("1.2", 2),
            ("1.2.3.4", 4),
            ("1.2.3.4.5.6.7.8", 8),
            ("0", 1),
            ("0.0.0", 3),
            ("1.0.0", 3),
            ("0.0.1", 3),
            ("", 0),
        ],
    )
    def test_part_count(self, source, count):
        """Test the number of parts found in common version strings."""
        v = parse(source)
        assert v.part_count == count
        assert len(v.parts) == count
        assert len(v) == count

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse("1.2.3")
        assert v.parts == (Number(1), Number(2), Number(3))

    def test_text_parts(self):
        """Test that letters become text parts."""
        assert parse("1.2.alpha").parts == (Number(1), Number(2), Text("alpha"))
        assert parse("1.2.dev.4").parts == (Number(1), Number(2), Text("dev"), Number(4))

    def test_digit_text_boundary(self):
        """Test that switching between digits and letters starts a new part."""
        assert parse("1.0rc2").parts == (Number(1), Number(0), Text("rc"), Number(2))
        assert parse("v2").parts == (Text("v"), Number(2))

    def test_numeric_value_not_lexical(self):
        """Test that numbers are stored by value."""
        assert parse("1.10").part(1) == Number(10)
        assert parse("007").parts == (Number(7),)

    def test_large_numbers_do_not_overflow(self):
        """Test numbers beyond 64 bits."""
        big = 2**64 + 5
        assert parse(f"1.{big}").part(1) == Number(big)

    def test_very_long_digit_run(self):
        """Test digit runs longer than the int() string conversion limit."""
        long_run = "9" * 5000
        v = parse("1." + long_run)
        assert v.part(1) == Number(10**5000 - 1)
        assert compare("1." + long_run, "1." + long_run[:-1]) is Ordering.GREATER
        assert compare("1." + long_run, "1." + long_run) is Ordering.EQUAL

    def test_long_digit_run_keeps_inner_zeros(self):
        """Test that chunked conversion keeps zeros inside long runs."""
        digits = "1" + "0" * 8500 + "7"
        assert parse(digits).part(0) == Number(10**8501 + 7)

    def test_separators(self):
        """Test that punctuation and whitespace only separate parts."""
        expected = (Number(1), Number(2), Number(3))
        for source in ["1.2.3", "1-2-3", "1_2_3", "1 2 3", "1+2/3", "1..2--3", " 1.2.3 "]:
            assert parse(source).parts == expected, source

    def test_leading_minus_is_separator(self):
        """Test that version parts are never negative."""
        assert parse("-32").parts == (Number(32),)

    def test_undefined_format(self):
        """Test parsing a messy version string."""
        assert parse(" .   -32 . 1").parts == (Number(32), Number(1))

    def test_complex_format(self):
        """Test parsing an application banner."""
        v = parse("MyApp 3.2.0 / build 0932")
        assert v.parts == (
            Text("MyApp"),
            Number(3),
            Number(2),
            Number(0),
            Text("build"),
            Number(932),
        )

    def test_unicode_text(self):
        """Test that non-ASCII letters are kept as text."""
        assert parse("1.0-bêta").parts == (Number(1), Number(0), Text("bêta"))

    def test_non_ascii_digits_are_text(self):
        """Test that only ASCII digits form numeric parts."""
        assert parse("١٢").parts == (Text("١٢"),)
        assert parse("1.٣").parts == (Number(1), Text("٣"))
        assert parse("2²").parts == (Number(2), Text("²"))

    @pytest.mark.parametrize("source", ["", " ", "...", "-_-", " . - _ / "])
    def test_empty_and_separator_only(self, source):
        """Test that strings without parts parse to an empty version."""
        v = parse(source)
        assert v.parts == ()
        assert v.is_empty

    def test_non_string_raises(self):
        """Test that non-string input is rejected."""
        with pytest.raises(TypeError):
            parse(123)  # type: ignore[arg-type]

    def test_idempotent(self):
        """Test that parsing the same string twice gives the same parts."""
        assert parse("1.2.alpha-3").parts == parse("1.2.alpha-3").parts

    def test_from_string(self):
        """Test the Version.from_string constructor."""
        assert Version.from_string("1.2").parts == parse("1.2").parts


class TestTokenize:
    """Tests for tokenize function."""

    def test_returns_list(self):
        assert tokenize("1.2.dev4") == [Number(1), Number(2), Text("dev"), Number(4)]

    def test_empty(self):
        assert tokenize("") == []


class TestParseWithManifest:
    """Tests for parse with a Manifest."""

    def test_default_manifest_changes_nothing(self):
        assert parse("1.2.alpha", Manifest()).parts == parse("1.2.alpha").parts

    def test_ignore_text(self):
        v = parse("1.2.alpha.3", Manifest(ignore_text=True))
        assert v.parts == (Number(1), Number(2), Number(3))

    def test_max_depth(self):
        v = parse("1.2.3.4", Manifest(max_depth=2))
        assert v.parts == (Number(1), Number(2))

    def test_max_depth_longer_than_version(self):
        assert parse("1.2", Manifest(max_depth=5)).parts == (Number(1), Number(2))

    def test_zero_max_depth_means_unlimited(self):
        assert parse("1.2.3", Manifest(max_depth=0)).part_count == 3

    def test_ignore_text_applied_before_depth(self):
        v = parse("1.alpha.2.3", Manifest(max_depth=2, ignore_text=True))
        assert v.parts == (Number(1), Number(2))

    def test_source_kept(self):
        assert parse("1.2.3.4", Manifest(max_depth=1)).as_string() == "1.2.3.4"

    def test_truncation_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="version_compare.version"):
            parse("1.2.3", Manifest(max_depth=1))
        assert "Truncating" in caplog.text

    def test_manifest_kept_on_version(self):
        manifest = Manifest(max_depth=2)
        assert parse("1.2.3", manifest).manifest is manifest
        assert parse("1.2.3").manifest == Manifest()

    def test_string_operand_uses_same_manifest(self):
        """Test that string operands are parsed like the version they meet."""
        v = parse("1.2.3", Manifest(max_depth=2))
        assert v.compare("1.2.9") is Ordering.EQUAL
        assert v.compare_to("1.2.9", "==")
        assert v.compare(parse("1.2.9")) is Ordering.LESS

    def test_string_operand_ignores_text_like_version(self):
        v = parse("1.2.alpha", Manifest(ignore_text=True))
        assert v.compare("1.2.beta") is Ordering.EQUAL


class TestVersion:
    """Tests for the Version object."""

    def test_as_string(self):
        """Test that the source string is returned unmodified."""
        for source in ["1.2.3", " 1.2 ", "", "MyApp 3.2.0 / build 0932"]:
            v = parse(source)
            assert v.as_string() == source
            assert str(v) == source

    def test_part(self):
        v = parse("1.2.3")
        assert v.part(0) == Number(1)
        assert v.part(2) == Number(3)

    def test_part_out_of_range(self):
        with pytest.raises(IndexError):
            parse("1.2.3").part(3)

    def test_iteration(self):
        assert list(parse("1.a")) == [Number(1), Text("a")]

    def test_immutable(self):
        v = parse("1.2")
        with pytest.raises(AttributeError):
            v.source = "2.0"  # type: ignore[misc]

    def test_repr_shows_parts(self):
        assert "Number(value=1)" in repr(parse("1"))

    def test_str_of_parts(self):
        assert [str(p) for p in parse("1.02.beta")] == ["1", "2", "beta"]

    def test_compare_non_string_raises(self):
        with pytest.raises(TypeError):
            parse("1.2").compare(None)  # type: ignore[arg-type]


class TestAsVersion:
    """Tests for as_version function."""

    def test_version_returned_unchanged(self):
        v = parse("1.2")
        assert as_version(v) is v

    def test_string_parsed(self):
        assert as_version("1.2").parts == (Number(1), Number(2))

    def test_string_parsed_with_manifest(self):
        assert as_version("1.2.3", Manifest(max_depth=1)).parts == (Number(1),)

    @pytest.mark.parametrize("value", [None, 1.2, b"1.2", ["1", "2"]])
    def test_other_types_raise(self, value):
        with pytest.raises(TypeError):
            as_version(value)  # type: ignore[arg-type]
