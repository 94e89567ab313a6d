"""State-machine lexer for parlex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState
├── core.py              # Lexer class (scan loop, pushback, result construction)
├── modes.py             # LexerState, Action, transition table
└── charsets.py          # CharClass and byte classification

Usage:
    >>> from parlex.lexer import Lexer
    >>> lexer = Lexer("(x 12abc)")
    >>> for result in lexer.tokenize():
    ...     print(result)
Token(LPAREN, '(', 1:1)
Token(IDENT, 'x', 1:2)
LexError(MALFORMED_NUMBER, '12abc', 1:4)
Token(RPAREN, ')', 1:9)

"""

from parlex.lexer.core import Lexer
from parlex.lexer.modes import LexerState

__all__ = ["Lexer", "LexerState"]
