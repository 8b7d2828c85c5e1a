"""Command line tokenizer."""

from .tokenizer import split_words, tokenize

__all__ = ["split_words", "tokenize"]
