"""yamlbridge: convert Python and numpy values to YAML text and back."""

from .errors import (
    YamlBridgeError,
    HigherDimensionsNotSupported,
    NullPlaceholderNotAllowed,
    TypeNotSupported,
    FlowStyleSelectionFailed,
    InvalidStyleArgument,
    DuplicateKey,
)
from .config import FlowStyle, DumpOptions, LoadOptions
from .utils.types import NULL_PLACEHOLDER, Timestamp
from .encode import dump
from .decode import load
from .io._yaml import dump_file, load_file
from .io._backend import ensure_library_available


def is_null(value) -> bool:
    """True if ``value`` is the null marker (None)."""
    return value is None


__all__ = [
    "dump",
    "load",
    "dump_file",
    "load_file",
    "is_null",
    "ensure_library_available",
    "FlowStyle",
    "DumpOptions",
    "LoadOptions",
    "NULL_PLACEHOLDER",
    "Timestamp",
    "YamlBridgeError",
    "HigherDimensionsNotSupported",
    "NullPlaceholderNotAllowed",
    "TypeNotSupported",
    "FlowStyleSelectionFailed",
    "InvalidStyleArgument",
    "DuplicateKey",
]
