from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from yamlbridge.config import DumpOptions, FlowStyle
from yamlbridge.encode.convert import convert
from yamlbridge.errors import FlowStyleSelectionFailed
from yamlbridge.io._backend import Backend, ensure_library_available
from yamlbridge.utils.types import NULL_PLACEHOLDER, Node

logger = logging.getLogger(__name__)

# FlowStyle -> PyYAML `default_flow_style`
_FLOW_STYLES: Dict[FlowStyle, Optional[bool]] = {
    FlowStyle.AUTO: None,
    FlowStyle.BLOCK: False,
    FlowStyle.FLOW: True,
}

_DOCUMENT_END = "...\n"


def flow_style_option(style: FlowStyle) -> Optional[bool]:
    try:
        return _FLOW_STYLES[style]
    except KeyError as e:
        raise FlowStyleSelectionFailed(f"Unable to select flow style {style!r}.") from e


def emit(tree: Node, options: DumpOptions, backend: Backend) -> str:
    """
    Render a converted tree to YAML text and turn null placeholders into ``null``.

    Parameters
    ----------
    tree:
        Output of `convert`.
    options:
        Validated dump options (flow style, indentation, width).
    backend:
        Initialized PyYAML backend.
    """
    text = backend.yaml.dump(
        tree,
        Dumper=backend.dumper,
        default_flow_style=flow_style_option(options.style),
        sort_keys=False,
        indent=options.indent,
        width=options.width,
        allow_unicode=options.allow_unicode,
    )
    text = text.replace(NULL_PLACEHOLDER, "null")
    # PyYAML closes a bare root scalar with an explicit "..." marker
    if text.endswith("\n" + _DOCUMENT_END):
        text = text[: -len(_DOCUMENT_END)]
    return text


def dump(
    data: Any,
    style: Union[str, FlowStyle] = FlowStyle.AUTO,
    *,
    indent: int = 2,
    width: int = 80,
    allow_unicode: bool = True,
) -> str:
    """
    Convert ``data`` to a YAML string.

    Parameters
    ----------
    data:
        Native value (see `convert` for the supported types).
    style:
        "auto" (default), "block" or "flow".
    indent, width, allow_unicode:
        Passed on to the emitter.

    Returns
    -------
    str
        The YAML document.

    Raises
    ------
    InvalidStyleArgument
        If ``style`` is not one of "auto", "block", "flow". Checked before any
        conversion takes place.

    Example
    -------
        >>> dump({"a": 1.0, "b": ["text", False]})
        'a: 1.0\\nb: [text, false]\\n'
    """
    options = DumpOptions(
        style=FlowStyle.parse(style),
        indent=int(indent),
        width=int(width),
        allow_unicode=bool(allow_unicode),
    )
    options.validate()
    backend = ensure_library_available()
    logger.debug("dump %s (style=%s)", type(data).__name__, options.style.value)
    tree = convert(data, NULL_PLACEHOLDER)
    return emit(tree, options, backend)
