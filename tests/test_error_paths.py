"""Error-path tests.

Lexical errors are values; exceptions cover strict consumers and
unusable sources.
"""

import pytest

from parlex import tokenize
from parlex.errors import LexicalError, ParlexError, SourceError
from parlex.tokens import LexError, LexErrorKind

# =========================================================================
# LexicalError construction and formatting
# =========================================================================


class TestLexicalErrorFormatting:
    """Verify LexicalError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = LexicalError("unexpected byte")
        assert str(err) == "unexpected byte"
        assert err.lineno is None
        assert err.col_offset is None
        assert err.error is None

    def test_with_line_and_column(self) -> None:
        err = LexicalError("bad number", lineno=10, col_offset=5)
        assert str(err) == "10:5 bad number"

    def test_with_source_file(self) -> None:
        err = LexicalError("bad", lineno=1, col_offset=1, source_file="prog.sx")
        assert str(err) == "prog.sx:1:1 bad"

    def test_is_parlex_error(self) -> None:
        assert isinstance(LexicalError("x"), ParlexError)

    def test_from_lex_error(self) -> None:
        value = LexError(LexErrorKind.MALFORMED_NUMBER, "1a", _lineno=3, _col=7)
        err = LexicalError.from_lex_error(value)
        assert err.error is value
        assert str(err) == "3:7 malformed numeric literal '1a'"


# =========================================================================
# LexError messages
# =========================================================================


class TestLexErrorMessages:
    """Each error kind describes itself."""

    @pytest.mark.parametrize(
        ("kind", "text", "expected"),
        [
            (LexErrorKind.UNRECOGNIZED_CHARACTER, "=", "unrecognized character '='"),
            (LexErrorKind.MALFORMED_NUMBER, "1.2.3", "malformed numeric literal '1.2.3'"),
            (LexErrorKind.NUMERIC_OVERFLOW, "99", "numeric literal out of range '99'"),
        ],
    )
    def test_message(self, kind: LexErrorKind, text: str, expected: str) -> None:
        assert LexError(kind, text).message == expected

    def test_repr(self) -> None:
        value = LexError(LexErrorKind.UNRECOGNIZED_CHARACTER, "@", _lineno=2, _col=4)
        assert repr(value) == "LexError(UNRECOGNIZED_CHARACTER, '@', 2:4)"


# =========================================================================
# Strict consumers
# =========================================================================


class TestStrictTokenize:
    """strict=True turns the first LexError into an exception."""

    def test_yields_until_error(self) -> None:
        seen = []
        with pytest.raises(LexicalError) as info:
            for result in tokenize("(a 1b c)", strict=True, source_file="prog.sx"):
                seen.append(result.text)
        assert seen == ["(", "a"]
        assert info.value.error.text == "1b"
        assert str(info.value) == "prog.sx:1:4 malformed numeric literal '1b'"

    def test_clean_input_does_not_raise(self) -> None:
        assert len(list(tokenize("(a 1 2.0)", strict=True))) == 5

    def test_non_strict_yields_errors(self) -> None:
        results = list(tokenize("1b"))
        assert isinstance(results[0], LexError)


# =========================================================================
# Sources
# =========================================================================


class TestSourceErrors:
    """Unusable inputs are rejected up front or on first bad item."""

    def test_unsupported_object(self) -> None:
        with pytest.raises(SourceError):
            list(tokenize(3.14))

    def test_source_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            list(tokenize(object()))

    def test_out_of_range_item(self) -> None:
        with pytest.raises(SourceError, match="256"):
            list(tokenize([40, 256]))

    def test_io_errors_propagate(self) -> None:
        class Broken:
            def read(self, n: int = -1) -> bytes:
                raise OSError("disk gone")

        with pytest.raises(OSError, match="disk gone"):
            list(tokenize(Broken()))
