from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Optional

from yamlbridge.utils.types import NULL_PLACEHOLDER, Timestamp

logger = logging.getLogger(__name__)

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
UNICODE_BREAKS = "\x85\u2028\u2029"


@dataclass(frozen=True, slots=True)
class Backend:
    """
    Handle on the PyYAML runtime used by the encoder and the decoder.

    Parameters
    ----------
    yaml:
        The imported ``yaml`` module.
    dumper:
        SafeDumper subclass: writes the null placeholder as a plain scalar and
        Timestamp strings as implicit YAML timestamps.
    loader:
        Loader class used to compose text into a node graph (libyaml-backed
        when available).
    """
    yaml: ModuleType
    dumper: type
    loader: type

    @property
    def version(self) -> str:
        return str(getattr(self.yaml, "__version__", "unknown"))

    def constructor(self) -> Any:
        """Fresh SafeConstructor for resolving scalar nodes to Python values."""
        return self.yaml.constructor.SafeConstructor()


_backend: Optional[Backend] = None
_lock = threading.Lock()


def _build_backend(yaml: ModuleType) -> Backend:

    class _Dumper(yaml.SafeDumper):

        def choose_scalar_style(self):
            # Same width as "null", so plain output keeps line breaks stable
            # once substituted.
            if self.event.value == NULL_PLACEHOLDER:
                return ""
            # single quotes would fold these breaks into spaces on reload
            if any(ch in self.event.value for ch in UNICODE_BREAKS):
                return '"'
            return super().choose_scalar_style()

        def ignore_aliases(self, data):
            return True

    def timestamp_representer(dumper, data: Timestamp):
        return dumper.represent_scalar(TIMESTAMP_TAG, str(data))

    _Dumper.add_representer(Timestamp, timestamp_representer)

    loader = getattr(yaml, "CSafeLoader", None) or yaml.SafeLoader
    return Backend(yaml=yaml, dumper=_Dumper, loader=loader)


def ensure_library_available() -> Backend:
    """
    Import PyYAML and build the dumper/loader classes, once per process.

    Safe to call repeatedly and from several threads: the first caller does the
    work, every later call returns the same Backend.

    Raises
    ------
    ImportError
        If PyYAML is not installed.
    """
    global _backend
    if _backend is not None:
        return _backend
    with _lock:
        if _backend is None:
            try:
                import yaml
            except ImportError as e:
                raise ImportError("PyYAML is required to read/write YAML. Install with `pip install pyyaml`.") from e
            _backend = _build_backend(yaml)
            logger.debug("PyYAML %s loaded (loader=%s)", _backend.version, _backend.loader.__name__)
    return _backend