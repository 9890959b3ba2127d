from __future__ import annotations

import os
from typing import Any, Union

from yamlbridge.config import FlowStyle
from yamlbridge.decode.loader import load
from yamlbridge.encode.emit import dump

PathLike = Union[str, "os.PathLike[str]"]


def dump_file(path: PathLike, data: Any, style: Union[str, FlowStyle] = FlowStyle.AUTO, **kwargs: Any) -> None:
    """Write ``data`` as YAML to ``path`` (UTF-8). Extra keywords go to `dump`."""
    text = dump(data, style, **kwargs)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def load_file(path: PathLike, convert_to_array: bool = True, **kwargs: Any) -> Any:
    """Read the YAML document at ``path`` (UTF-8). Extra keywords go to `load`."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return load(text, convert_to_array, **kwargs)
