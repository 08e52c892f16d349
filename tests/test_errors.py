"""Unit tests for the wordvocab exception hierarchy."""

import pickle

import pytest

import wordvocab as wv
from wordvocab.errors import (
    DuplicateTokenError,
    TokenNotFoundError,
    VocabularyError,
    WordVocabError,
)


# Hierarchy
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "exc_type", [VocabularyError, DuplicateTokenError, TokenNotFoundError]
)
def test_errors_share_base(exc_type):
    """All library errors derive from WordVocabError."""
    assert issubclass(exc_type, WordVocabError)


def test_public_exports():
    """Errors are re-exported from the package root."""
    assert wv.DuplicateTokenError is DuplicateTokenError
    assert wv.TokenNotFoundError is TokenNotFoundError


# Messages
# ---------------------------------------------------------------------------


def test_vocabulary_error_details():
    """Optional token and size are appended to the message."""
    err = VocabularyError("failed", token="tok", size=7)
    assert str(err) == "failed (token: 'tok') (vocab size: 7)"
    assert err.token == "tok"
    assert err.size == 7


def test_vocabulary_error_plain():
    """Without details the message is unchanged."""
    assert str(VocabularyError("failed")) == "failed"


def test_empty_token_is_rendered():
    """The empty token still shows up in the message."""
    assert str(DuplicateTokenError("")) == "token already exists (token: '')"


def test_control_chars_are_escaped():
    """Control characters in tokens are escaped in messages."""
    err = TokenNotFoundError("a\tb")
    assert str(err) == "token does not exist (token: 'a\\u0009b')"
    assert err.token == "a\tb"


def test_token_not_found_sentinel():
    """TokenNotFoundError carries the invalid index sentinel."""
    err = TokenNotFoundError("x")
    assert err.idx == wv.INVALID_IDX
    assert isinstance(err, KeyError)


# Pickling
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("exc_type", [DuplicateTokenError, TokenNotFoundError])
def test_errors_pickle_with_token(exc_type):
    """Unpickled errors keep the original token and message."""
    err = exc_type("a\tb")
    restored = pickle.loads(pickle.dumps(err))
    assert type(restored) is exc_type
    assert restored.token == "a\tb"
    assert str(restored) == str(err)


def test_token_not_found_pickle_keeps_sentinel():
    """The sentinel index survives pickling."""
    restored = pickle.loads(pickle.dumps(TokenNotFoundError("x")))
    assert restored.idx == wv.INVALID_IDX
