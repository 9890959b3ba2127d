from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from yamlbridge.errors import DuplicateKey
from yamlbridge.io._backend import Backend

SEQ_TAG = "tag:yaml.org,2002:seq"
MAP_TAG = "tag:yaml.org,2002:map"
SET_TAG = "tag:yaml.org,2002:set"
OMAP_TAG = "tag:yaml.org,2002:omap"
PAIRS_TAG = "tag:yaml.org,2002:pairs"
MERGE_TAG = "tag:yaml.org,2002:merge"


class NodeConverter:
    """
    Turn a composed PyYAML node graph into native Python values.

    Scalars are resolved by PyYAML's implicit tags (null, bool, int, float,
    timestamp, str) through a SafeConstructor. Collections are walked here so
    that mapping order and key uniqueness are under our control:

    - sequences become lists,
    - mappings become dicts in document order, with ``<<`` merge keys
      flattened and duplicate keys rejected,
    - ``!!omap`` / ``!!pairs`` sequences become ordered dicts.

    Mapping keys are always strings: the scalar text as written in the document.
    """

    def __init__(self, backend: Backend) -> None:
        self._nodes = backend.yaml.nodes
        self._error = backend.yaml.constructor.ConstructorError
        self._constructor = backend.constructor()

    def convert(self, node: Any) -> Any:
        if node is None:
            return None
        if isinstance(node, self._nodes.ScalarNode):
            return self._constructor.construct_object(node, deep=True)
        if isinstance(node, self._nodes.SequenceNode):
            if node.tag in (OMAP_TAG, PAIRS_TAG):
                return self._mapping(node, self._pairs(node))
            if node.tag != SEQ_TAG:
                self._constructor.construct_undefined(node)
            return [self.convert(item) for item in node.value]
        if isinstance(node, self._nodes.MappingNode):
            if node.tag not in (MAP_TAG, SET_TAG):
                self._constructor.construct_undefined(node)
            own, merged = self._flatten(node)
            return self._mapping(node, own, merged)
        raise self._error(None, None, f"unexpected node type {type(node).__name__}", getattr(node, "start_mark", None))

    def _flatten(self, node: Any) -> Tuple[List[Tuple[Any, Any]], List[Tuple[Any, Any]]]:
        """
        Split a mapping into its own pairs and the pairs pulled in by ``<<``.

        The node is left untouched: aliases share node objects, so a mapping
        can be visited more than once.
        """
        own: List[Tuple[Any, Any]] = []
        merged: List[Tuple[Any, Any]] = []
        for key_node, value_node in node.value:
            if key_node.tag != MERGE_TAG:
                own.append((key_node, value_node))
                continue
            if isinstance(value_node, self._nodes.MappingNode):
                sources = [value_node]
            elif isinstance(value_node, self._nodes.SequenceNode):
                sources = value_node.value
            else:
                sources = [None]
            # earlier sources win, so they are applied last
            for source in reversed(sources):
                if not isinstance(source, self._nodes.MappingNode):
                    raise self._error(
                        "while constructing a mapping", node.start_mark,
                        "expected a mapping or list of mappings for merging", value_node.start_mark,
                    )
                sub_own, sub_merged = self._flatten(source)
                merged.extend(sub_merged + sub_own)
        return own, merged

    def _pairs(self, node: Any) -> List[Tuple[Any, Any]]:
        pairs: List[Tuple[Any, Any]] = []
        for item in node.value:
            if not isinstance(item, self._nodes.MappingNode) or len(item.value) != 1:
                raise self._error(
                    "while constructing an ordered mapping", node.start_mark,
                    "expected a mapping of length 1", item.start_mark,
                )
            pairs.append(item.value[0])
        return pairs

    def _mapping(
        self,
        node: Any,
        pairs: Iterable[Tuple[Any, Any]],
        merged: Iterable[Tuple[Any, Any]] = (),
    ) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        # merged keys first; explicit keys may override them
        for key_node, value_node in merged:
            out[self._key(node, key_node)] = self.convert(value_node)
        seen = set()
        for key_node, value_node in pairs:
            key = self._key(node, key_node)
            if key in seen:
                mark = key_node.start_mark
                raise DuplicateKey(
                    f"Duplicate mapping key {key!r} at line {mark.line + 1}, column {mark.column + 1}."
                )
            seen.add(key)
            out[key] = self.convert(value_node)
        return out

    def _key(self, node: Any, key_node: Any) -> str:
        if not isinstance(key_node, self._nodes.ScalarNode):
            raise self._error(
                "while constructing a mapping", node.start_mark,
                "found a non-scalar key", key_node.start_mark,
            )
        return str(key_node.value)


def convert_node(node: Any, backend: Backend) -> Any:
    return NodeConverter(backend).convert(node)
