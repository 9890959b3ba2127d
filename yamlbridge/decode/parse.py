from __future__ import annotations

from typing import Any, Optional

from yamlbridge.io._backend import Backend


def parse(text: str, backend: Backend) -> Optional[Any]:
    """
    Compose YAML text into a PyYAML node graph.

    Returns None for an empty document. Aliases are resolved to the anchored
    node; a stream with more than one document raises PyYAML's ComposerError.
    """
    return backend.yaml.compose(text, Loader=backend.loader)
