from __future__ import annotations

import logging
from typing import Any

from yamlbridge.config import LoadOptions
from yamlbridge.decode.nodes import convert_node
from yamlbridge.decode.parse import parse
from yamlbridge.decode.reconcile import reconcile
from yamlbridge.io._backend import ensure_library_available

logger = logging.getLogger(__name__)


def load(text: str, convert_to_array: bool = True, *, max_array_ndim: int = 3) -> Any:
    """
    Convert a YAML string to native Python values.

    Parameters
    ----------
    text:
        A single YAML document. An empty document loads as None.
    convert_to_array:
        If True (default), uniform numeric and boolean sequences (and nested
        sequences of them, up to ``max_array_ndim`` levels) become numpy arrays.
    max_array_ndim:
        Maximum number of dimensions of reconciled arrays (1-3).

    Returns
    -------
    Any
        None, bool, int, float, str, datetime/date, list, dict or numpy array.

    Raises
    ------
    DuplicateKey
        If a mapping repeats a key.
    yaml.YAMLError
        Any error raised by PyYAML itself (syntax errors, unknown tags,
        multi-document streams) is passed through unchanged.
    """
    options = LoadOptions(convert_to_array=bool(convert_to_array), max_array_ndim=int(max_array_ndim))
    options.validate()
    backend = ensure_library_available()
    node = parse(text, backend)
    value = convert_node(node, backend)
    logger.debug("loaded %s (convert_to_array=%s)", type(value).__name__, options.convert_to_array)
    return reconcile(value, options)
