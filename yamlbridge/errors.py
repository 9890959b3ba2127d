from __future__ import annotations


class YamlBridgeError(Exception):
    """
    Base class for conversion failures.

    Every subclass carries a stable ``identifier`` (e.g.
    ``"yaml:dump:TypeNotSupported"``) in addition to the human-readable message.
    """
    identifier: str = "yaml:Error"


class HigherDimensionsNotSupported(YamlBridgeError, ValueError):
    identifier = "yaml:dump:HigherDimensionsNotSupported"


class NullPlaceholderNotAllowed(YamlBridgeError, ValueError):
    identifier = "yaml:dump:NullPlaceholderNotAllowed"


class TypeNotSupported(YamlBridgeError, TypeError):
    identifier = "yaml:dump:TypeNotSupported"


class FlowStyleSelectionFailed(YamlBridgeError, RuntimeError):
    identifier = "yaml:dump:FlowStyleSelectionFailed"


class InvalidStyleArgument(YamlBridgeError, ValueError):
    identifier = "yaml:dump:InvalidStyleArgument"


class DuplicateKey(YamlBridgeError, ValueError):
    identifier = "yaml:load:DuplicateKey"


__all__ = [
    "YamlBridgeError",
    "HigherDimensionsNotSupported",
    "NullPlaceholderNotAllowed",
    "TypeNotSupported",
    "FlowStyleSelectionFailed",
    "InvalidStyleArgument",
    "DuplicateKey",
]
