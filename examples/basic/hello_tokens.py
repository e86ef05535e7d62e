"""Tokenize a Markdown line, then reuse the same Tokenizer for another."""

from marklex import Tokenizer

tokenizer = Tokenizer("# Hello, **World**!")
print(tokenizer.tokens)

tokenizer.change_input("- [ ] todo")
print(tokenizer.tokens)
