"""WordVocab: bidirectional word token dictionary."""

from ._config import get_default_encoding, set_default_encoding
from .errors import (
    DuplicateTokenError,
    TokenNotFoundError,
    VocabularyError,
    WordVocabError,
)
from .types import INVALID_IDX, MAX_IDX, Idx, Token
from .vocab import TokenDict

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("wordvocab")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "TokenDict",
    "Token",
    "Idx",
    "MAX_IDX",
    "INVALID_IDX",
    "WordVocabError",
    "VocabularyError",
    "DuplicateTokenError",
    "TokenNotFoundError",
    "get_default_encoding",
    "set_default_encoding",
]
