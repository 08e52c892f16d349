import codecs
import os

DEFAULT_ENCODING: str = "utf-8"
ENCODING_ENV_VAR: str = "WORDVOCAB_ENCODING"

_encoding: str = DEFAULT_ENCODING


def set_default_encoding(name: str) -> None:
    """
    Set the text encoding used when loading token files.

    :raises LookupError: If ``name`` is not a known codec.
    """
    global _encoding
    _encoding = codecs.lookup(name).name


def get_default_encoding() -> str:
    """Return the default token file encoding (respects env var override)."""
    override = os.environ.get(ENCODING_ENV_VAR, "").strip()
    if override:
        return override
    return _encoding
