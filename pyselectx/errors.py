"""
PySelectX 錯誤處理模組。

提供統一的異常層級、集中式錯誤處理器與 `handle_error` 裝飾器。
選擇器僅在建構階段拋出配置錯誤；呼叫階段由使用者函數拋出的異常一律原樣傳遞。
"""

import functools
import logging
import traceback as tb
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union, cast

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PySelectXError(Exception):
    """所有 PySelectX 異常的基礎類。"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.traceback = "".join(tb.format_stack()[:-1])
        self.handled = False

    def to_dict(self) -> Dict[str, Any]:
        """
        將錯誤轉換為字典，方便記錄或上報。

        Returns:
            包含錯誤類型、訊息與細節的字典
        """
        return {
            "type": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PySelectXError):
    """配置相關的錯誤，於建構 memoizer 或 selector 時拋出。"""

    def __init__(self, message: str, component: str, config_key: Optional[str] = None, **kwargs: Any):
        details = {"component": component, "config_key": config_key}
        details.update(kwargs)
        super().__init__(message, details)
        self.component = component
        self.config_key = config_key


class InputSelectorTypeError(ConfigurationError, TypeError):
    """輸入選擇器中含有不可呼叫的物件。"""

    def __init__(self, dependency_types: List[str]):
        message = (
            "Selector creators expect all input-selectors to be functions, "
            f"instead received the following types: [{', '.join(dependency_types)}]"
        )
        super().__init__(message, "selector_creator", "input_selectors", dependency_types=dependency_types)
        self.dependency_types = dependency_types


class StructuredSelectorTypeError(ConfigurationError, TypeError):
    """create_structured_selector 的第一個參數不是映射。"""

    def __init__(self, received_type: str):
        message = (
            "create_structured_selector expects first argument to be a mapping "
            f"where each value is a selector, instead received a {received_type}"
        )
        super().__init__(message, "structured_selector", "selectors", received_type=received_type)
        self.received_type = received_type


class ErrorHandler:
    """
    集中式錯誤處理器，用於捕獲、日誌記錄和錯誤報告。

    錯誤一律記錄到 `pyselectx.errors` logger 並向上傳遞，應用程式可透過
    `pyselectx` logger 自行設定輸出；主控台與檔案輸出需明確開啟。
    """

    def __init__(self, log_to_console: bool = False, log_to_file: bool = False, log_file: Optional[str] = None):
        """
        Args:
            log_to_console: 是否額外輸出到主控台
            log_to_file: 是否額外寫入日誌檔
            log_file: 日誌檔路徑，`log_to_file` 為 True 時必須提供
        """
        if log_to_file and not log_file:
            raise ConfigurationError("log_file is required when log_to_file is enabled",
                                     "error_handler", "log_file")
        self.log_to_console = log_to_console
        self.log_to_file = log_to_file
        self.log_file = log_file
        self.handlers: List[Callable[[PySelectXError], None]] = []

        self._logger = logger
        self._log_handlers: List[logging.Handler] = []
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        if log_to_console:
            self._log_handlers.append(logging.StreamHandler())
        if log_to_file:
            self._log_handlers.append(logging.FileHandler(cast(str, log_file), encoding="utf-8"))
        for log_handler in self._log_handlers:
            log_handler.setLevel(logging.ERROR)
            log_handler.setFormatter(formatter)
            self._logger.addHandler(log_handler)

    def close(self) -> None:
        """移除並關閉此處理器開啟的日誌輸出。"""
        for log_handler in self._log_handlers:
            self._logger.removeHandler(log_handler)
            log_handler.close()
        self._log_handlers = []

    def register_handler(self, handler: Callable[[PySelectXError], None]) -> None:
        """
        註冊額外的錯誤回呼，例如上報到監控系統。

        Args:
            handler: 接收 PySelectXError 的函數
        """
        self.handlers.append(handler)

    def handle(self, error: Union[PySelectXError, Exception]) -> None:
        """
        記錄錯誤並通知所有已註冊的回呼。非 PySelectXError 會先被包裝。

        Args:
            error: 要處理的異常
        """
        if not isinstance(error, PySelectXError):
            # 原始異常才是會被重新拋出的物件，標記在它身上
            try:
                setattr(error, "handled", True)
            except (AttributeError, TypeError):
                pass
            error = PySelectXError(str(error), {"original_type": type(error).__name__})
        error.handled = True

        self._logger.error("%s: %s", type(error).__name__, error.message)

        for handler in self.handlers:
            try:
                handler(error)
            except Exception:
                # 回呼失敗不影響原始錯誤的傳遞
                self._logger.exception("error handler %r failed", handler)


# 單例錯誤處理器
global_error_handler = ErrorHandler(log_to_console=False)


def handle_error(func: Callable[..., T]) -> Callable[..., T]:
    """
    裝飾器：將函數拋出的異常交給全域錯誤處理器，然後原樣重新拋出。

    Args:
        func: 要包裝的函數

    Returns:
        包裝後的函數
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except Exception as err:
            # 巢狀呼叫時只回報一次
            if not getattr(err, "handled", False):
                global_error_handler.handle(err)
            raise

    return wrapper
