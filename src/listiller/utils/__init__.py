from .naming import resource_name, unsuffix
from .radix import from_base36, to_base36

__all__ = [
    "from_base36",
    "resource_name",
    "to_base36",
    "unsuffix",
]
