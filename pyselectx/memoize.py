"""
單一快取槽的記憶化函數。

每個記憶化函數只記住最近一次的呼叫：參數與上次淺比較相等時直接回傳上次的結果，
否則重新計算並覆蓋。這不是通用快取，沒有淘汰策略也沒有歷史紀錄。

注意：比較與覆蓋不是原子操作。同一個記憶化函數若在多個執行緒中被同時呼叫，
可能讀到為另一組參數計算的結果；多執行緒使用時需由呼叫端自行加鎖。
"""
import functools
from typing import Any, Callable, Optional, Tuple

from .equality import are_arguments_shallowly_equal, default_equality_check
from .errors import ConfigurationError
from .types import EqualityCheck, MemoizedFunction


class _MemoSlot:
    """記憶化函數私有的快取槽：上一次的參數與結果。"""

    __slots__ = ("last_args", "last_result")

    def __init__(self):
        self.last_args: Optional[Tuple[Any, ...]] = None
        self.last_result: Any = None

    def clear(self) -> None:
        self.last_args = None
        self.last_result = None


def default_memoize(func: Callable[..., Any], equality_check: EqualityCheck = default_equality_check) -> MemoizedFunction:
    """
    預設的記憶化函數。

    Args:
        func: 要記憶化的函數
        equality_check: 逐一比較參數的函數，預設為同一物件比較

    Returns:
        記憶化後的函數，附帶 `clear_cache()` 可清除快取
    """
    if not callable(equality_check):
        raise ConfigurationError(
            f"equality_check must be callable, instead received a {type(equality_check).__name__}",
            "default_memoize", "equality_check",
        )

    slot = _MemoSlot()

    @functools.wraps(func)
    def memoized(*args: Any) -> Any:
        if not are_arguments_shallowly_equal(equality_check, slot.last_args, args):
            slot.last_result = func(*args)

        # 命中快取時也要更新，下次以這次的參數為準
        slot.last_args = args
        return slot.last_result

    memoized.clear_cache = slot.clear  # type: ignore[attr-defined]
    return memoized  # type: ignore[return-value]
