from .loader import load
from .nodes import NodeConverter, convert_node
