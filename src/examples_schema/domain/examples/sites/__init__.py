# sites/__init__.py

from .payloads import expand_payload
from .walker import OPERATION_METHODS, collect_example_sites

__all__ = [
    "OPERATION_METHODS",
    "collect_example_sites",
    "expand_payload",
]
