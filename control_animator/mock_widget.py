"""MockWidget - 模擬 UI 元件。

提供整數尺寸、位置、顏色與不透明度等常見屬性，並記錄每次寫入，
讓動畫引擎能在沒有實際 UI 框架的情況下運作與測試。
"""

from __future__ import annotations

import logging
from typing import Any

from .color import Color

logger = logging.getLogger(__name__)


class MockWidget:
    """模擬元件。

    顏色屬性只接受 Color，不透明度限制在 0.0~1.0，
    以模擬真實框架對屬性型別的檢查。

    Attributes:
        name: 元件名稱。
        left: 左側座標。
        top: 上方座標。
        width: 寬度。
        height: 高度。
        write_log: 每次屬性寫入的 (屬性名稱, 值) 紀錄。
    """

    def __init__(
        self,
        name: str = "widget",
        left: int = 0,
        top: int = 0,
        width: int = 100,
        height: int = 30,
        back_color: Color = Color(255, 255, 255),
        fore_color: Color = Color(0, 0, 0),
        opacity: float = 1.0,
    ) -> None:
        self.name = name
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self._back_color = back_color
        self._fore_color = fore_color
        self._opacity = opacity
        self.write_log: list[tuple[str, Any]] = []

    def __setattr__(self, key: str, value: Any) -> None:
        super().__setattr__(key, value)
        if not key.startswith("_") and key != "write_log" and hasattr(self, "write_log"):
            self.write_log.append((key, value))

    @property
    def back_color(self) -> Color:
        return self._back_color

    @back_color.setter
    def back_color(self, value: Color) -> None:
        self._back_color = self._check_color(value)

    @property
    def fore_color(self) -> Color:
        return self._fore_color

    @fore_color.setter
    def fore_color(self, value: Color) -> None:
        self._fore_color = self._check_color(value)

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"opacity 必須在 0.0~1.0 之間，收到 {value}")
        self._opacity = float(value)

    @staticmethod
    def _check_color(value: Any) -> Color:
        if not isinstance(value, Color):
            raise TypeError(f"需要 Color，收到 {type(value).__name__}")
        if any(not 0 <= c <= 255 for c in value):
            raise ValueError(f"顏色通道超出 0~255：{value}")
        return value

    def __repr__(self) -> str:
        return (
            f"MockWidget({self.name!r}, left={self.left}, top={self.top}, "
            f"width={self.width}, height={self.height}, "
            f"back_color={self._back_color.to_hex()}, opacity={self._opacity:.2f})"
        )
