from __future__ import annotations

import dataclasses
import datetime as dt
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Tuple

import numpy as np

from yamlbridge.encode.normalize import normalize
from yamlbridge.errors import NullPlaceholderNotAllowed, TypeNotSupported
from yamlbridge.utils.types import NULL_PLACEHOLDER, Node, Timestamp


def convert(value: Any, null_placeholder: str = NULL_PLACEHOLDER) -> Node:
    """
    Convert a native value into a tree of plain Python objects PyYAML can emit.

    The returned tree only contains ``list``, ``dict`` (str keys, insertion
    order), ``str``, ``Timestamp``, ``bool``, ``int`` and ``float``. ``None`` is
    replaced by ``null_placeholder``; the emitter turns it back into ``null``.

    Parameters
    ----------
    value:
        Any combination of the supported native types: None, str, bool,
        int/float and their numpy scalar types, lists/tuples, mappings with
        str keys, dataclasses, namedtuples, numpy arrays (1-3 dims, numeric,
        boolean, object, datetime64 or structured) and datetimes.
    null_placeholder:
        Text written in place of null values. Strings containing it are
        rejected.

    Raises
    ------
    NullPlaceholderNotAllowed
        If a string contains ``null_placeholder``.
    HigherDimensionsNotSupported
        If an array has more than three dimensions.
    TypeNotSupported
        If no conversion rule exists for a value (or a mapping key is not a str).
    """
    if _is_empty(value):
        return []
    value = normalize(value)

    if isinstance(value, str):
        if null_placeholder in value:
            raise NullPlaceholderNotAllowed(
                f"Strings must not contain {null_placeholder!r} since it is used as a placeholder for null values."
            )
        # str.__str__ skips overrides such as Enum.__str__
        return str.__str__(value)
    if value is None:
        return null_placeholder
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, np.unsignedinteger):
        return _to_bigint(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        return float(value)
    if isinstance(value, (dt.date, np.datetime64)):
        return _format_timestamp(value)
    if _is_record(value):
        return _convert_fields(_record_items(value), null_placeholder)
    if isinstance(value, Mapping):
        return _convert_fields(_mapping_items(value), null_placeholder)
    if isinstance(value, np.ndarray):
        return _convert_array(value, null_placeholder)
    if isinstance(value, (list, tuple)):
        return [convert(v, null_placeholder) for v in value]

    raise TypeNotSupported(f"Data type {type(value).__name__!r} is not supported.")


def _is_empty(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.size == 0
    return isinstance(value, (list, tuple)) and not _is_record(value) and len(value) == 0


def _to_bigint(value: np.unsignedinteger) -> int:
    # uint64 does not fit a signed 64-bit slot; go through hex text
    return int(format(int(value), "x"), 16)


def _format_timestamp(value: Any) -> Timestamp:
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise TypeNotSupported("NaT cannot be converted to a YAML timestamp.")
        value = value.astype("datetime64[ms]").item()
        if not isinstance(value, dt.datetime):
            raise TypeNotSupported(f"datetime64 value {value!r} is outside the datetime range.")
    elif not isinstance(value, dt.datetime):
        value = dt.datetime(value.year, value.month, value.day)
    # isoformat pads the year to four digits
    return Timestamp(value.replace(tzinfo=None).isoformat(timespec="milliseconds"))


def _is_record(value: Any) -> bool:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return True
    return isinstance(value, np.void) and value.dtype.names is not None


def _record_items(value: Any) -> Iterable[Tuple[str, Any]]:
    """Fields of a dataclass, namedtuple or numpy record, in declaration order."""
    if isinstance(value, np.void):
        return ((name, value[name]) for name in value.dtype.names)
    if isinstance(value, tuple):
        return zip(value._fields, value)
    return ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value))


def _mapping_items(value: Mapping) -> Iterable[Tuple[str, Any]]:
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeNotSupported(
                f"Mapping keys must be strings, got key {key!r} of type {type(key).__name__!r}."
            )
        yield key, item


def _convert_fields(items: Iterable[Tuple[str, Any]], null_placeholder: str) -> Dict[str, Node]:
    out: Dict[str, Node] = {}
    for key, item in items:
        key = convert(key, null_placeholder)
        out[key] = convert(item, null_placeholder)
    return out


def _convert_array(value: np.ndarray, null_placeholder: str) -> Node:
    # 1-D here: normalize() already split anything deeper
    if value.ndim == 0:
        return convert(value[()], null_placeholder)
    if value.dtype.kind not in "biufMOUV":
        raise TypeNotSupported(f"Arrays of dtype {value.dtype!s} are not supported.")
    return [convert(v, null_placeholder) for v in value]
