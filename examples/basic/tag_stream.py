"""Lex a note with inline tags and report malformed ones."""

from papyrus import Lexer, TokenizeError, TokenType

note = "Thanks [user:42] for the draft of [article:7].\nSee also [articel:8]."

for result in Lexer(note):
    if isinstance(result, TokenizeError):
        print(f"warning: {result.cause} at {result.position}")
    elif result.type == TokenType.TAG:
        print(f"tag: {result.value.kind.value} #{result.value.id}")
    else:
        print(f"text: {result.value!r}")
