"""
PySelectX 的共用類型定義。
"""
from typing import Any, Callable, Protocol, Tuple, TypeVar

Output = TypeVar("Output")
R = TypeVar("R")

# 從狀態（以及額外參數）中取值的函數
StateSelector = Callable[..., Output]
# 將多個輸入值合併為結果的函數
ResultSelector = Callable[..., R]
# 比較兩個值是否相等的判斷函數
EqualityCheck = Callable[[Any, Any], bool]
# 選擇器的依賴清單
Dependencies = Tuple[Callable[..., Any], ...]


class MemoizedFunction(Protocol):
    """經過 default_memoize 包裝的函數。"""

    def __call__(self, *args: Any) -> Any: ...

    def clear_cache(self) -> None: ...


class MemoizeStrategy(Protocol):
    """記憶化策略：接收函數與選項，回傳記憶化後的函數。"""

    def __call__(self, func: Callable[..., Any], *options: Any) -> Callable[..., Any]: ...


class MemoizedSelector(Protocol):
    """由 selector creator 產生、附帶檢視方法的選擇器。"""

    result_func: Callable[..., Any]
    dependencies: Dependencies
    memoized_result_func: Callable[..., Any]

    def __call__(self, *args: Any) -> Any: ...

    def recomputations(self) -> int: ...

    def reset_recomputations(self) -> int: ...

    def clear_cache(self) -> None: ...


class SelectorCreator(Protocol):
    """create_selector 這類函數的介面。"""

    def __call__(self, *funcs: Any, result_fn: Any = None) -> MemoizedSelector: ...
