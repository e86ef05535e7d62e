"""Utility modules for marklex.

Provides:
- logger: get_logger for logging
- merge: merge for in-place deep merging of dict/list structures
- ranges: is_in_range for bounded numeric checks
"""

from marklex.utils.logger import get_logger
from marklex.utils.merge import merge
from marklex.utils.ranges import is_in_range

__all__ = [
    "get_logger",
    "is_in_range",
    "merge",
]
