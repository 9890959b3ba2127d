from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from yamlbridge.errors import InvalidStyleArgument


class FlowStyle(str, Enum):
    """
    Collection layout used by the emitter.

    AUTO
        Let PyYAML decide: collections holding only scalars are written inline,
        everything else as indented blocks.
    BLOCK
        Indented, dash/colon layout everywhere.
    FLOW
        Bracketed inline layout everywhere (``[a, b]``, ``{k: v}``).
    """
    AUTO = "auto"
    BLOCK = "block"
    FLOW = "flow"

    @classmethod
    def parse(cls, style: Union[str, "FlowStyle"]) -> "FlowStyle":
        if isinstance(style, FlowStyle):
            return style
        if isinstance(style, str):
            for member in cls:
                if member.value == style:
                    return member
        raise InvalidStyleArgument(
            f"style must be one of {[m.value for m in cls]}, got {style!r}."
        )


@dataclass(frozen=True, slots=True)
class DumpOptions:
    """
    Options for the encoder.

    Parameters
    ----------
    style
        Flow style of collections (see FlowStyle).
    indent
        Indentation width of nested block collections.
    width
        Preferred maximum line width before PyYAML wraps long scalars.
    allow_unicode
        If True, non-ASCII characters are written as-is instead of escaped.
    """
    style: FlowStyle = FlowStyle.AUTO
    indent: int = 2
    width: int = 80
    allow_unicode: bool = True

    def validate(self) -> None:
        if not isinstance(self.style, FlowStyle):
            raise InvalidStyleArgument(f"style must be a FlowStyle, got {self.style!r}.")
        if not (2 <= int(self.indent) <= 9):
            raise ValueError(f"indent must be in [2,9], got {self.indent}.")
        if int(self.width) <= int(self.indent) * 2:
            raise ValueError(f"width must be > 2*indent, got {self.width}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style.value,
            "indent": int(self.indent),
            "width": int(self.width),
            "allow_unicode": bool(self.allow_unicode),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "DumpOptions":
        opts = cls(
            style=FlowStyle.parse(d.get("style", FlowStyle.AUTO.value)),
            indent=int(d.get("indent", 2)),
            width=int(d.get("width", 80)),
            allow_unicode=bool(d.get("allow_unicode", True)),
        )
        opts.validate()
        return opts


@dataclass(frozen=True, slots=True)
class LoadOptions:
    """
    Options for the decoder.

    Parameters
    ----------
    convert_to_array
        If True, uniform numeric (or all-boolean) sequences are turned into
        numpy arrays. Otherwise every sequence stays a list.
    max_array_ndim
        Upper bound on the number of dimensions of a reconciled array. Deeper
        uniform nestings keep their outer levels as lists.
    """
    convert_to_array: bool = True
    max_array_ndim: int = 3

    def validate(self) -> None:
        if not (1 <= int(self.max_array_ndim) <= 3):
            raise ValueError(f"max_array_ndim must be in [1,3], got {self.max_array_ndim}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "convert_to_array": bool(self.convert_to_array),
            "max_array_ndim": int(self.max_array_ndim),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "LoadOptions":
        opts = cls(
            convert_to_array=bool(d.get("convert_to_array", True)),
            max_array_ndim=int(d.get("max_array_ndim", 3)),
        )
        opts.validate()
        return opts
