"""Custom exception hierarchy for wordvocab errors."""

from ._sanitise import render_token
from .types import INVALID_IDX, Idx, Token


class WordVocabError(Exception):
    """Base exception for all wordvocab errors."""


class VocabularyError(WordVocabError):
    """Raised when vocabulary operations fail."""

    def __init__(
        self,
        message: str,
        *,
        token: Token | None = None,
        size: int | None = None,
    ) -> None:
        """Initialize with optional token and size that get appended to the message."""
        extra = ""
        # the empty string is a valid token so compare against None
        if token is not None:
            extra += f" (token: {render_token(token)})"
        if size is not None:
            extra += f" (vocab size: {size})"
        super().__init__(message + extra)
        self.token = token
        self.size = size


class DuplicateTokenError(VocabularyError):
    """Raised when adding a token that already exists."""

    def __init__(self, token: Token) -> None:
        super().__init__("token already exists", token=token)

    def __reduce__(self):
        # args holds the rendered message, rebuild from the token instead
        return (self.__class__, (self.token,))


class TokenNotFoundError(VocabularyError, KeyError):
    """
    Raised when looking up the index of an absent token.

    ``idx`` holds the sentinel index that accompanies the failure.
    """

    def __init__(self, token: Token) -> None:
        super().__init__("token does not exist", token=token)
        self.idx: Idx = INVALID_IDX

    def __reduce__(self):
        return (self.__class__, (self.token,))

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return Exception.__str__(self)
