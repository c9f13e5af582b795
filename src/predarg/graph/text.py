"""
Tokenized text unit annotated by views.

A TextAnnotation is the substrate every view shares: a fixed token sequence
and, optionally, the raw text those tokens were cut from. Constituents address
it by token span; surface forms are read back through it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from predarg.errors import InvalidSpanError


@dataclass(eq=False)
class TextAnnotation:
    """
    A tokenized text unit.

    Attributes:
        tokens: Token strings in order.
        text: Raw text. If None, the tokens joined by single spaces.
        corpus_id: Corpus identifier.
        text_id: Identifier of this text within the corpus.
        token_char_offsets: (start, end) character offsets of each token in text.
            Computed when not supplied.
    """

    tokens: List[str]
    text: Optional[str] = None
    corpus_id: str = ""
    text_id: str = ""
    token_char_offsets: List[Tuple[int, int]] = field(default_factory=list)

    def __post_init__(self):
        self.tokens = list(self.tokens)
        if self.text is None:
            self.text = " ".join(self.tokens)
        if not self.token_char_offsets:
            self.token_char_offsets = _align_tokens(self.text, self.tokens)
        elif len(self.token_char_offsets) != len(self.tokens):
            raise ValueError(
                f"Got {len(self.token_char_offsets)} offsets for {len(self.tokens)} tokens"
            )

    @property
    def size(self) -> int:
        """Number of tokens."""
        return len(self.tokens)

    def check_span(self, start: int, end: int) -> None:
        """Raise InvalidSpanError unless [start, end) is a non-empty span of this text."""
        if start < 0 or end > len(self.tokens) or start >= end:
            raise InvalidSpanError(
                f"Invalid span [{start}, {end}) for text with {len(self.tokens)} tokens"
            )

    def get_tokenized_text(self, start: int, end: int) -> str:
        """Tokens of [start, end) joined by single spaces."""
        return " ".join(self.tokens[start:end])

    def get_text(self, start: int, end: int) -> str:
        """Raw text covered by the tokens of [start, end)."""
        self.check_span(start, end)
        char_start = self.token_char_offsets[start][0]
        char_end = self.token_char_offsets[end - 1][1]
        return self.text[char_start:char_end]

    def __repr__(self) -> str:
        return f"TextAnnotation(id={self.text_id!r}, tokens={len(self.tokens)})"


def _align_tokens(text: str, tokens: List[str]) -> List[Tuple[int, int]]:
    """Locate each token in text, scanning left to right."""
    offsets = []
    cursor = 0
    for token in tokens:
        idx = text.find(token, cursor)
        if idx < 0:
            raise ValueError(f"Token {token!r} not found in text after offset {cursor}")
        offsets.append((idx, idx + len(token)))
        cursor = idx + len(token)
    return offsets
