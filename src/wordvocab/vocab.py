"""
Word token dictionary mapping tokens to densely assigned indices.
"""

import logging
import os
from collections.abc import Iterable

import regex as re

from ._config import get_default_encoding
from ._decorators import timed
from ._sanitise import render_token
from .errors import DuplicateTokenError, TokenNotFoundError, VocabularyError
from .types import MAX_IDX, Idx, Token

log = logging.getLogger(__name__)

# only "\n" ends a line; a "\r" right before it (or at EOF) belongs to the terminator
_LINE_END = re.compile(r"\r?\n?\Z")


class TokenDict:
    """
    Container for a word token dictionary.

    Maps each token to an index assigned in insertion order. Indices are never
    removed, so an index stays valid for the life of the dictionary. The
    mapping is not thread-safe.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        """
        Build a dictionary where each token gets its position in ``tokens``.

        Duplicates overwrite earlier entries (last write wins), which can leave
        gaps in the index range.

        :param tokens: Iterable of tokens. A bare ``str`` is not accepted.
        :raises TypeError: If ``tokens`` is a single string.
        """
        # a str is iterable and would be indexed character by character
        if isinstance(tokens, str):
            raise TypeError(
                f"{self.__class__.__name__} expects an iterable of tokens, not a str"
            )
        # token -> index
        self._tokens: dict[Token, Idx] = {}
        for i, tok in enumerate(tokens):
            self._tokens[tok] = i

    @classmethod
    @timed("token file load", level=logging.INFO)
    def from_file(
        cls, path: str | os.PathLike[str], encoding: str | None = None
    ) -> "TokenDict":
        """
        Read a newline delimited file with one token per line.

        Lines are added in order with :meth:`add` semantics, so repeated lines
        keep their first index and are otherwise skipped.

        :param path: Path to the token file.
        :param encoding: Text encoding, defaults to the configured encoding.
        :raises OSError: If the file cannot be opened or read.
        """
        encoding = encoding or get_default_encoding()
        voc = cls()
        skipped = 0

        log.debug(f"loading tokens from {path} ({encoding})")

        # newline="\n" disables universal newlines so a lone "\r" stays in the token
        with open(path, "r", encoding=encoding, newline="\n") as f:
            for line in f:
                tok = _LINE_END.sub("", line)
                try:
                    voc.add(tok)
                except DuplicateTokenError:
                    log.debug(f"skipping duplicate token {render_token(tok)}")
                    skipped += 1

        log.info(
            f"loaded {voc.size()} tokens from {path} ({skipped} duplicates skipped)"
        )
        return voc

    def add(self, token: Token) -> None:
        """
        Add a token with the next sequential index.

        The next index is the current size. After constructing from a sequence
        with duplicates the indices have gaps, so the new index can equal one
        already held by another token (``TokenDict(["cat", "dog", "cat",
        "bird"]).add("fish")`` gives "fish" index 3, same as "bird"). Lookups by
        index then return the earlier token.

        :raises DuplicateTokenError: If the token already exists.
        :raises VocabularyError: If the index range is exhausted.
        """
        if self.has_token(token):
            raise DuplicateTokenError(token)

        idx = self.size()
        if idx > MAX_IDX:
            raise VocabularyError("index range exhausted", token=token, size=idx)
        self._tokens[token] = idx

    def index(self, token: Token) -> Idx:
        """
        Return the index of ``token``.

        :raises TokenNotFoundError: If the token does not exist. The error
            carries ``INVALID_IDX`` in its ``idx`` attribute.
        """
        try:
            return self._tokens[token]
        except KeyError:
            raise TokenNotFoundError(token) from None

    def token(self, idx: Idx) -> Token:
        """
        Return the token for ``idx``, or the empty string if none exists.

        An empty result is ambiguous with an empty token; use :meth:`has_idx`
        to tell them apart.
        """
        for tok, i in self._tokens.items():
            if i == idx:
                return tok
        return ""

    def has_idx(self, idx: Idx) -> bool:
        """Return True if some token has index ``idx``."""
        return any(i == idx for i in self._tokens.values())

    def has_token(self, token: Token) -> bool:
        """Return True if the dictionary contains ``token``."""
        return token in self._tokens

    def size(self) -> int:
        """Return the number of tokens in the dictionary."""
        return len(self._tokens)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.has_token(token)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()})"
