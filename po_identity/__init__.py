"""po_identity – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    AUTOGENERATED_FLAG,
    FUZZY_FLAG,
    MalformedTextError,
    PluralTranslation,
    Translation,
    TranslationEntry,
    are_same,
    find_same,
    flatten_text,
    is_autogenerated,
    is_protected,
    key_of,
    mark_as_fuzzy,
)

try:
    __version__ = metadata.version("po-identity")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
