"""Lexer states, actions, and the transition table.

The scanner is a deterministic finite-state machine over CharClass.
Each call to Lexer.next() starts in START and runs until an action
produces a result.

Any (state, class) pair absent from TRANSITIONS is a boundary: the
pending run is emitted and the byte is pushed back for the next scan.

"""

from __future__ import annotations

from enum import Enum, auto

from parlex.lexer.charsets import CharClass


class LexerState(Enum):
    """Scanner states.

    - START: nothing consumed for the current lexeme
    - IDENT: run began with a letter or underscore
    - INT: run of digits
    - FLOAT: digit run holding exactly one decimal point
    - ERROR: run known to be malformed; keeps absorbing identifier bytes

    """

    START = auto()
    IDENT = auto()
    INT = auto()
    FLOAT = auto()
    ERROR = auto()


class Action(Enum):
    """What the scanner does with the byte just read."""

    SKIP = auto()  # Consume and discard
    ACCEPT = auto()  # Consume and append to the pending run
    EMIT_LPAREN = auto()  # Consume and emit LPAREN
    EMIT_RPAREN = auto()  # Consume and emit RPAREN
    REJECT = auto()  # Consume and emit a single-byte error
    BOUNDARY = auto()  # Push back, emit the pending run


S = LexerState
C = CharClass

TRANSITIONS: dict[tuple[LexerState, CharClass], tuple[LexerState, Action]] = {
    (S.START, C.WHITESPACE): (S.START, Action.SKIP),
    (S.START, C.LPAREN): (S.START, Action.EMIT_LPAREN),
    (S.START, C.RPAREN): (S.START, Action.EMIT_RPAREN),
    (S.START, C.LETTER): (S.IDENT, Action.ACCEPT),
    (S.START, C.UNDERSCORE): (S.IDENT, Action.ACCEPT),
    (S.START, C.DIGIT): (S.INT, Action.ACCEPT),
    (S.START, C.DOT): (S.FLOAT, Action.ACCEPT),
    (S.START, C.OTHER): (S.START, Action.REJECT),
    (S.INT, C.DIGIT): (S.INT, Action.ACCEPT),
    (S.FLOAT, C.DIGIT): (S.FLOAT, Action.ACCEPT),
    (S.INT, C.DOT): (S.FLOAT, Action.ACCEPT),
    (S.FLOAT, C.DOT): (S.ERROR, Action.ACCEPT),
    (S.INT, C.LETTER): (S.ERROR, Action.ACCEPT),
    (S.FLOAT, C.LETTER): (S.ERROR, Action.ACCEPT),
    (S.IDENT, C.LETTER): (S.IDENT, Action.ACCEPT),
    (S.IDENT, C.DIGIT): (S.IDENT, Action.ACCEPT),
    (S.IDENT, C.UNDERSCORE): (S.IDENT, Action.ACCEPT),
    (S.ERROR, C.LETTER): (S.ERROR, Action.ACCEPT),
    (S.ERROR, C.DIGIT): (S.ERROR, Action.ACCEPT),
    (S.ERROR, C.UNDERSCORE): (S.ERROR, Action.ACCEPT),
}

del S, C

_BOUNDARY: tuple[LexerState, Action] = (LexerState.START, Action.BOUNDARY)


def transition(state: LexerState, char_class: CharClass) -> tuple[LexerState, Action]:
    """Look up the next state and action for ``char_class`` in ``state``."""
    return TRANSITIONS.get((state, char_class), _BOUNDARY)
