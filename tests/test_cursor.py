# =============================================================================
# test_cursor.py - Lexical Layer Unit Tests
# =============================================================================
# Tests for the Hawk cursor: whitespace and line tracking, literal matching,
# identifier scanning with reserved words, and numeric literal boundaries.
# =============================================================================

import pytest
from hawk.checker.cursor import Cursor, RESERVED_WORDS
from hawk.checker.errors import (
    ExpectedIdentifierError,
    ExpectedNumberError,
    ReservedKeywordError,
    UnexpectedTokenError,
)


# =============================================================================
# Whitespace and Line Tracking
# =============================================================================

class TestWhitespace:
    """Test whitespace skipping and line counting."""

    def test_skip_spaces_and_tabs(self):
        """Spaces and tabs are skipped without changing the line."""
        cursor = Cursor(" \t  x")
        cursor.skip_whitespace()
        assert cursor.pos == 4
        assert cursor.line == 1

    def test_newlines_advance_line(self):
        """Each newline skipped increments the line once."""
        cursor = Cursor("\n\n  \nx")
        cursor.skip_whitespace()
        assert cursor.line == 4
        assert cursor.source[cursor.pos] == "x"

    def test_idempotent_without_whitespace(self):
        """Skipping with no whitespace ahead changes nothing."""
        cursor = Cursor("x")
        cursor.skip_whitespace()
        cursor.skip_whitespace()
        assert cursor.pos == 0
        assert cursor.line == 1

    def test_skip_to_end(self):
        """Trailing whitespace leaves the cursor at the end."""
        cursor = Cursor("  \n ")
        cursor.skip_whitespace()
        assert cursor.at_end()
        assert cursor.line == 2


# =============================================================================
# Literal Matching
# =============================================================================

class TestLiterals:
    """Test peek() and consume()."""

    def test_peek_does_not_consume(self):
        """peek() reports a match but leaves the literal unread."""
        cursor = Cursor("begin")
        assert cursor.peek("begin")
        assert cursor.pos == 0

    def test_peek_skips_whitespace(self):
        """peek() skips leading whitespace even when it fails."""
        cursor = Cursor("   end")
        assert not cursor.peek("begin")
        assert cursor.pos == 3

    def test_peek_is_case_sensitive(self):
        """Literals match byte for byte."""
        assert not Cursor("BEGIN").peek("begin")

    def test_peek_past_end(self):
        """A literal longer than the remaining input does not match."""
        assert not Cursor("en").peek("end")
        assert not Cursor("").peek(";")

    def test_consume_advances(self):
        """consume() moves past the literal."""
        cursor = Cursor(" := 3")
        cursor.consume(":=")
        assert cursor.pos == 3

    def test_consume_failure_names_literal(self):
        """A failed consume reports the literal it expected."""
        cursor = Cursor("x")
        with pytest.raises(UnexpectedTokenError) as exc_info:
            cursor.consume(";")
        assert exc_info.value.message == 'unexpected token: ";"'
        assert exc_info.value.literal == ";"

    def test_consume_failure_line_after_whitespace(self):
        """The error line is taken after skipping whitespace."""
        cursor = Cursor("\n\n  x")
        with pytest.raises(UnexpectedTokenError) as exc_info:
            cursor.consume("end")
        assert exc_info.value.line == 3
        assert cursor.pos == 4


# =============================================================================
# Identifier Scanning
# =============================================================================

class TestIdentifiers:
    """Test identifier scanning."""

    def test_simple_identifier(self):
        """Letters form an identifier."""
        assert Cursor("count").scan_identifier() == "count"

    def test_identifier_with_digits_and_underscore(self):
        """Digits and underscores may follow the first character."""
        assert Cursor("_tmp_2x").scan_identifier() == "_tmp_2x"

    def test_identifier_is_maximal(self):
        """Scanning stops at the first non-identifier character."""
        cursor = Cursor("  ab1:=2")
        assert cursor.scan_identifier() == "ab1"
        assert cursor.source[cursor.pos:] == ":=2"

    def test_unicode_letters(self):
        """Alphabetic characters outside ASCII are accepted."""
        assert Cursor("größe ").scan_identifier() == "größe"

    def test_digit_start_rejected(self):
        """An identifier cannot start with a digit."""
        with pytest.raises(ExpectedIdentifierError) as exc_info:
            Cursor("1abc").scan_identifier()
        assert exc_info.value.message == "expected an identifier"

    def test_empty_input_rejected(self):
        """End of input is not an identifier."""
        with pytest.raises(ExpectedIdentifierError):
            Cursor("   ").scan_identifier()

    @pytest.mark.parametrize("word", sorted(RESERVED_WORDS))
    def test_reserved_words_rejected(self, word):
        """Every reserved word is refused as an identifier."""
        with pytest.raises(ReservedKeywordError) as exc_info:
            Cursor(word).scan_identifier()
        assert exc_info.value.message == f"{word} is a reserved keyword"
        assert exc_info.value.word == word

    def test_reserved_prefix_is_identifier(self):
        """A reserved word is only rejected when it is the whole identifier."""
        assert Cursor("ending").scan_identifier() == "ending"
        assert Cursor("if2").scan_identifier() == "if2"

    def test_reserved_word_line(self):
        """The reserved-word error carries the line of the word."""
        with pytest.raises(ReservedKeywordError) as exc_info:
            Cursor("\n\nwhile").scan_identifier()
        assert exc_info.value.line == 3

    def test_reserved_word_list(self):
        """The reserved words are exactly the Hawk keywords and types."""
        assert RESERVED_WORDS == {
            "program", "begin", "end", "if", "then", "else", "while",
            "loop", "input", "output", "int", "float", "double",
        }


# =============================================================================
# Number Scanning
# =============================================================================

class TestNumbers:
    """Test numeric literal boundaries."""

    def test_integer(self):
        """A digit run is a number."""
        assert Cursor("42").scan_number() == "42"

    def test_decimal(self):
        """Digits, a point and more digits form one number."""
        cursor = Cursor(" 12.5;")
        assert cursor.scan_number() == "12.5"
        assert cursor.source[cursor.pos] == ";"

    def test_trailing_point_rejected(self):
        """A point with no digits after it invalidates the whole number."""
        with pytest.raises(ExpectedNumberError) as exc_info:
            Cursor("12.").scan_number()
        assert exc_info.value.message == "expected a number"

    def test_trailing_point_before_semicolon_rejected(self):
        """The trailing-point rule applies mid-statement too."""
        with pytest.raises(ExpectedNumberError):
            Cursor("12.;").scan_number()

    def test_lone_point_rejected(self):
        """A point alone is not a number."""
        with pytest.raises(ExpectedNumberError):
            Cursor(".").scan_number()

    def test_leading_point_rejected(self):
        """A number needs an integer part."""
        with pytest.raises(ExpectedNumberError):
            Cursor(".5").scan_number()

    def test_letters_rejected(self):
        """Identifiers are not numbers."""
        with pytest.raises(ExpectedNumberError):
            Cursor("x").scan_number()

    def test_second_point_stops_scan(self):
        """Only one fractional part is consumed."""
        cursor = Cursor("1.2.3")
        assert cursor.scan_number() == "1.2"
        assert cursor.source[cursor.pos:] == ".3"

    def test_number_error_line(self):
        """The number error carries the current line."""
        with pytest.raises(ExpectedNumberError) as exc_info:
            Cursor("\n   x").scan_number()
        assert exc_info.value.line == 2


# =============================================================================
# Position Restore
# =============================================================================

class TestRestore:
    """Test mark() and restore()."""

    def test_restore_rewinds_position_and_line(self):
        """restore() undoes scanning, including line changes."""
        cursor = Cursor("a\n\nb")
        pos, line = cursor.mark()
        cursor.scan_identifier()
        cursor.scan_identifier()
        assert cursor.line == 3
        cursor.restore(pos, line)
        assert cursor.mark() == (0, 1)
