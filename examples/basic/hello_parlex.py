"""Lex a short program and report errors alongside tokens."""

from parlex import LexError, tokenize

for result in tokenize("(define x 1.5)\n(print x 12abc)"):
    if isinstance(result, LexError):
        print(f"{result.location}: {result.message}")
    else:
        print(result.type.name, result.value)
