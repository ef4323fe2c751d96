"""數值種類 - 動畫可驅動的三種值域。

每種值域只攜帶自己需要的欄位，並負責在給定時間與方向下
計算 clamp 後、可直接寫回屬性的值：

- ScalarRange：整數範圍，從擷取的基準值移動到基準值 + delta。
- ColorRange：RGB 三通道，各通道獨立插值並限制在 0~255。
- NormalizedRange：明確給定的 min~max 範圍，寫回前除以 100。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from .color import Color
from .easing import DURATION, clamp, ease_in_out_cubic

# NormalizedRange 寫回前的除數
NORMALIZED_DIVISOR = 100.0


def _eased_int(elapsed: float, start: float, delta: float, state: bool) -> int:
    """依方向計算緩動值並截斷為整數（朝 0 截斷）。"""
    if state:
        value = ease_in_out_cubic(elapsed, start, delta, DURATION)
    else:
        value = ease_in_out_cubic(elapsed, start + delta, -delta, DURATION)
    return int(value)


@dataclass(frozen=True)
class ScalarRange:
    """整數範圍：base_value <-> base_value + delta。"""

    base_value: float
    delta: float
    native_type: type = int

    @property
    def endpoints(self) -> tuple[float, float]:
        return (self.base_value, self.base_value + self.delta)

    def value_at(self, elapsed: float, state: bool) -> Any:
        value = _eased_int(elapsed, self.base_value, self.delta, state)
        low, high = self.endpoints
        value = clamp(value, int(low), int(high))
        return self.native_type(value)


@dataclass(frozen=True)
class ColorRange:
    """顏色範圍：color_a <-> color_b，三通道獨立插值。"""

    color_a: Color
    color_b: Color

    @property
    def endpoints(self) -> tuple[Color, Color]:
        return (self.color_a, self.color_b)

    def value_at(self, elapsed: float, state: bool) -> Color:
        a = self.color_a.to_array()
        b = self.color_b.to_array()
        if state:
            eased = ease_in_out_cubic(elapsed, a, b - a, DURATION)
        else:
            eased = ease_in_out_cubic(elapsed, b, a - b, DURATION)
        channels = np.clip(np.trunc(eased).astype(np.int64), 0, 255)
        return Color.from_array(channels)


@dataclass(frozen=True)
class NormalizedRange:
    """明確範圍：range_min <-> range_max，寫回值為整數結果 / 100。

    呼叫端須自行以「百分之一」為單位提供 min / max，
    例如不透明度 0.0~1.0 應以 (0, 100) 建構。
    """

    range_min: float
    range_max: float

    @property
    def endpoints(self) -> tuple[float, float]:
        return (self.range_min, self.range_max)

    def value_at(self, elapsed: float, state: bool) -> float:
        delta = self.range_max - self.range_min
        value = _eased_int(elapsed, self.range_min, delta, state)
        value = clamp(value, int(self.range_min), int(self.range_max))
        return value / NORMALIZED_DIVISOR


ValueKind = Union[ScalarRange, ColorRange, NormalizedRange]
