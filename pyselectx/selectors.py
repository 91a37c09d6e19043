"""
選擇器建構模組。

`create_selector` 將多個輸入選擇器與一個結果函數組合成記憶化的選擇器，
輸入值不變時不會重新計算結果。
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Sequence

from .errors import (
    ConfigurationError, InputSelectorTypeError, StructuredSelectorTypeError, handle_error
)
from .memoize import default_memoize
from .types import Dependencies, MemoizedSelector, MemoizeStrategy, SelectorCreator

logger = logging.getLogger(__name__)


def get_dependencies(funcs: Sequence[Any]) -> Dependencies:
    """
    取出並檢查輸入選擇器。

    支援兩種寫法：`create_selector([sel_a, sel_b], result)` 與
    `create_selector(sel_a, sel_b, result)`。

    Args:
        funcs: 去除結果函數後的參數

    Returns:
        輸入選擇器組成的 tuple

    Raises:
        InputSelectorTypeError: 任一輸入選擇器不可呼叫
    """
    if funcs and isinstance(funcs[0], (list, tuple)):
        dependencies = tuple(funcs[0])
    else:
        dependencies = tuple(funcs)

    if not all(callable(dep) for dep in dependencies):
        raise InputSelectorTypeError([type(dep).__name__ for dep in dependencies])

    return dependencies


def create_selector_creator(memoize: MemoizeStrategy, *memoize_options: Any) -> SelectorCreator:
    """
    建立自訂的 selector creator。

    Args:
        memoize: 用於結果函數的記憶化策略，例如 `default_memoize`
        *memoize_options: 傳給記憶化策略的其餘參數，例如自訂的比較函數

    Returns:
        與 `create_selector` 用法相同的函數
    """
    if not callable(memoize):
        raise ConfigurationError(
            f"memoize must be callable, instead received a {type(memoize).__name__}",
            "selector_creator", "memoize",
        )

    @handle_error
    def selector_creator(*funcs: Any, result_fn: Optional[Callable[..., Any]] = None) -> MemoizedSelector:
        if result_fn is None:
            if not funcs:
                raise ConfigurationError("Selector creators expect a result function",
                                         "selector_creator", "result_fn")
            result_func, funcs = funcs[-1], funcs[:-1]
        else:
            result_func = result_fn

        if not callable(result_func):
            raise ConfigurationError(
                f"Selector creators expect the result function to be callable, "
                f"instead received a {type(result_func).__name__}",
                "selector_creator", "result_fn",
            )

        dependencies = get_dependencies(funcs)
        recomputations = 0

        def counted_result_func(*params: Any) -> Any:
            nonlocal recomputations
            recomputations += 1
            return result_func(*params)

        memoized_result_func = memoize(counted_result_func, *memoize_options)

        # 外層永遠以同一物件比較：完全相同的參數就不必再跑一次輸入選擇器
        def selector_body(*args: Any) -> Any:
            params = [dependency(*args) for dependency in dependencies]
            return memoized_result_func(*params)

        selector = default_memoize(selector_body)
        selector_slot_clear = selector.clear_cache

        def clear_cache() -> None:
            selector_slot_clear()
            if hasattr(memoized_result_func, "clear_cache"):
                memoized_result_func.clear_cache()

        def get_recomputations() -> int:
            return recomputations

        def reset_recomputations() -> int:
            nonlocal recomputations
            recomputations = 0
            return recomputations

        selector.result_func = result_func  # type: ignore[attr-defined]
        selector.dependencies = dependencies  # type: ignore[attr-defined]
        selector.memoized_result_func = memoized_result_func  # type: ignore[attr-defined]
        selector.recomputations = get_recomputations  # type: ignore[attr-defined]
        selector.reset_recomputations = reset_recomputations  # type: ignore[attr-defined]
        selector.clear_cache = clear_cache  # type: ignore[attr-defined]

        logger.debug("created selector for %s with %d input selector(s)",
                     getattr(result_func, "__name__", repr(result_func)), len(dependencies))
        return selector  # type: ignore[return-value]

    return selector_creator


create_selector = create_selector_creator(default_memoize)


@handle_error
def create_structured_selector(
    selectors: Mapping,
    selector_creator: SelectorCreator = create_selector,
) -> MemoizedSelector:
    """
    建立回傳字典的選擇器，每個鍵對應一個選擇器的輸出。

    Args:
        selectors: 鍵到選擇器的映射
        selector_creator: 用來建立選擇器的函數，預設為 `create_selector`

    Returns:
        回傳 `{key: selector(*args)}` 的記憶化選擇器，鍵的順序與輸入相同

    Raises:
        StructuredSelectorTypeError: `selectors` 不是映射
    """
    if not isinstance(selectors, Mapping):
        raise StructuredSelectorTypeError(type(selectors).__name__)

    keys = list(selectors.keys())

    def combine(*values: Any) -> Dict[Any, Any]:
        return dict(zip(keys, values))

    return selector_creator([selectors[key] for key in keys], combine)
