"""
PySelectX：記憶化選擇器函式庫。

由輸入選擇器從狀態中取值，再交給結果函數計算衍生值；
輸入值沒有改變時直接回傳上次的結果。
"""
import logging

from .errors import (
    PySelectXError, ConfigurationError,
    InputSelectorTypeError, StructuredSelectorTypeError,
    ErrorHandler, global_error_handler, handle_error
)
from .equality import (
    default_equality_check, value_equality_check, deep_equality_check,
    are_arguments_shallowly_equal
)
from .memoize import default_memoize
from .selectors import (
    get_dependencies, create_selector_creator, create_selector, create_structured_selector
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# 匯出所有公開 API
__all__ = [
    # Errors
    "PySelectXError", "ConfigurationError",
    "InputSelectorTypeError", "StructuredSelectorTypeError",
    "ErrorHandler", "global_error_handler", "handle_error",

    # Equality
    "default_equality_check", "value_equality_check", "deep_equality_check",
    "are_arguments_shallowly_equal",

    # Memoize
    "default_memoize",

    # Selectors
    "get_dependencies", "create_selector_creator", "create_selector",
    "create_structured_selector",
]
