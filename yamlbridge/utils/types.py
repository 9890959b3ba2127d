from __future__ import annotations

from typing import Any, Dict, List, Union

import numpy as np
from numpy.typing import NDArray

NULL_PLACEHOLDER: str = "$%&?"  # 4 characters, like "null"


class Timestamp(str):
    """Timestamp already formatted as ``YYYY-MM-DDTHH:MM:SS.sss``."""
    __slots__ = ()


# Plain Python tree handed to the emitter
Node = Union[None, bool, int, float, str, Timestamp, List["Node"], Dict[str, "Node"]]

NumericArray = NDArray[np.number]
BoolArray = NDArray[np.bool_]

Native = Any

__all__ = [
    "NULL_PLACEHOLDER",
    "Timestamp",
    "Node",
    "NumericArray", "BoolArray",
    "Native",
]
