"""緩動函式 - 三次方緩入緩出（cubic ease-in-out）。"""

from __future__ import annotations

from typing import TypeVar

import numpy as np

# 引擎內部時間單位，不是秒
DURATION = 10.0

_T = TypeVar("_T", float, np.ndarray)


def ease_in_out_cubic(t: _T, b: _T, c: _T, d: float = DURATION) -> _T:
    """計算三次方緩入緩出插值。

    前半段加速、後半段減速，t=0 時為 b，t=d 時為 b + c。
    支援 numpy 陣列逐元素計算。

    Args:
        t: 目前時間，0~d。
        b: 起始值。
        c: 變化量（可為負）。
        d: 總時長。

    Returns:
        插值結果。
    """
    u = np.asarray(t, dtype=np.float64) / (d / 2)
    first = c / 2 * u**3 + b
    u2 = u - 2
    second = c / 2 * (u2**3 + 2) + b
    result = np.where(u < 1, first, second)
    if result.ndim == 0:
        return float(result)
    return result


def clamp(value: int, low: int, high: int) -> int:
    """將 value 限制在兩端點之間，端點順序不拘。"""
    if low > high:
        low, high = high, low
    return max(low, min(high, value))
