"""Tests for the top-level API."""

from parlex import LexError, Lexer, Token, TokenType, tokenize


class TestTokenize:
    def test_is_lazy(self) -> None:
        produced = []

        def source():
            for byte in b"a b ":
                produced.append(byte)
                yield byte

        stream = tokenize(source())
        assert produced == []
        first = next(stream)
        assert first.value == "a"
        assert len(produced) == 2

    def test_accepts_bytes_and_str(self) -> None:
        assert list(tokenize(b"(x)")) == list(tokenize("(x)"))

    def test_source_file(self) -> None:
        (token,) = tokenize("x", source_file="prog.sx")
        assert str(token.location) == "prog.sx:1:1"


class TestResultTypes:
    def test_repr_is_debug_rendering(self) -> None:
        rendered = [repr(r) for r in Lexer("(abc 123 1.3 =)")]
        assert rendered == [
            "Token(LPAREN, '(', 1:1)",
            "Token(IDENT, 'abc', 1:2)",
            "Token(INT, '123', 1:6)",
            "Token(FLOAT, '1.3', 1:10)",
            "LexError(UNRECOGNIZED_CHARACTER, '=', 1:14)",
            "Token(RPAREN, ')', 1:15)",
        ]

    def test_value_types(self) -> None:
        paren, name, integer, real = Lexer("(a 1 1.0").tokenize()
        assert paren.value is None
        assert isinstance(name.value, str)
        assert type(integer.value) is int
        assert type(real.value) is float

    def test_results_are_frozen(self) -> None:
        import dataclasses

        import pytest

        (token,) = Lexer("x").tokenize()
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "y"  # type: ignore[misc]

    def test_results_are_hashable(self) -> None:
        results = set(Lexer("a a =").tokenize())
        assert len(results) == 3

    def test_union_members(self) -> None:
        for result in tokenize("a ="):
            assert isinstance(result, (Token, LexError))
        assert TokenType.IDENT.name == "IDENT"
