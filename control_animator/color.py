"""顏色值型別 - RGB 三通道。"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np
import numpy.typing as npt


class Color(NamedTuple):
    """RGB 顏色，每個通道為 0~255 的整數。

    建構時不檢查範圍；動畫輸出一律經過 clip 後才寫回。
    """

    r: int
    g: int
    b: int

    @classmethod
    def from_value(cls, value: Color | Sequence[int]) -> Color:
        """由 Color 或長度為 3 的序列建立 Color。

        Raises:
            TypeError: 若為字串或不可迭代的值。
            ValueError: 若通道數不是 3。
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, (str, bytes)):
            raise TypeError(f"顏色不可為字串：{value!r}")
        channels = list(value)
        if len(channels) != 3:
            raise ValueError(f"顏色需要 3 個通道，收到 {len(channels)} 個")
        return cls(*(int(c) for c in channels))

    @classmethod
    def from_array(cls, channels: npt.NDArray[np.int64]) -> Color:
        return cls(int(channels[0]), int(channels[1]), int(channels[2]))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def clamped(self) -> Color:
        """回傳各通道限制在 0~255 之間的新顏色。"""
        return Color.from_array(np.clip(np.array(self, dtype=np.int64), 0, 255))

    def to_hex(self) -> str:
        r, g, b = self.clamped()
        return f"#{r:02x}{g:02x}{b:02x}"
