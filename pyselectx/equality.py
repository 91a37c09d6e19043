"""
參數比較模組。

提供淺比較（只比較一層）與幾個可替換的相等判斷函數，供 memoizer 使用。
"""
from typing import Any, Optional, Sequence

from immutables import Map
from pydantic import BaseModel

from .types import EqualityCheck


def default_equality_check(a: Any, b: Any) -> bool:
    """預設的比較函數：同一個物件（或同一個常值）才算相等。"""
    return a is b


def value_equality_check(a: Any, b: Any) -> bool:
    """以 `==` 比較。"""
    return a == b


def are_arguments_shallowly_equal(
    equality_check: EqualityCheck,
    prev_args: Optional[Sequence[Any]],
    next_args: Optional[Sequence[Any]],
) -> bool:
    """
    比較前後兩份參數是否相等，只比較一層。

    Args:
        equality_check: 逐一比較每個位置的函數
        prev_args: 上一份參數，None 表示尚未呼叫過
        next_args: 當前的參數

    Returns:
        每個位置都相等時回傳 True；任一份為 None 或長度不同時回傳 False
    """
    if prev_args is None or next_args is None or len(prev_args) != len(next_args):
        return False

    # 一遇到不相等就停止，後面的位置不再比較
    for i in range(len(prev_args)):
        if not equality_check(prev_args[i], next_args[i]):
            return False

    return True


def deep_equality_check(a: Any, b: Any) -> bool:
    """
    深度比較，遞迴處理 dict、immutables.Map、list、tuple、set 與 Pydantic 模型。
    比較過程中出錯時回傳 False。
    """
    try:
        return _deep_equals(a, b)
    except Exception:
        return False


def _deep_equals(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, BaseModel) or isinstance(b, BaseModel):
        if type(a) is not type(b):
            return False
        return _deep_equals(a.model_dump(), b.model_dump())
    if isinstance(a, (dict, Map)) and isinstance(b, (dict, Map)):
        if len(a) != len(b):
            return False
        for key in a:
            if key not in b or not _deep_equals(a[key], b[key]):
                return False
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(_deep_equals(x, y) for x, y in zip(a, b))
    return a == b
