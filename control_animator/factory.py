"""工廠函式 - 建立排程器與依參數形式建立動畫。

透過 create_scheduler() 根據 mode 參數或環境變數 CONTROL_ANIMATOR_SCHEDULER
建立 TickScheduler 或 RealtimeTickScheduler 實例。
"""

from __future__ import annotations

import logging
import numbers
import os
from typing import Any

from .animation import DEFAULT_SPEED, ControlAnimation
from .color import Color
from .tick_source import RealtimeTickScheduler, TickScheduler

logger = logging.getLogger(__name__)

DEFAULT_TICK_SECONDS = 0.001


def create_scheduler(mode: str | None = None, **kwargs) -> TickScheduler:
    """根據模式建立排程器。

    Args:
        mode: "manual" 或 "realtime"。若為 None，則讀取環境變數
              CONTROL_ANIMATOR_SCHEDULER，預設為 "manual"。
        **kwargs: 傳遞給對應建構子的額外參數。
            realtime 模式支援 tick_seconds，未提供時讀取環境變數
            CONTROL_ANIMATOR_TICK_SECONDS，預設 0.001。

    Returns:
        TickScheduler 實例。

    Raises:
        ValueError: 若 mode 不是 "manual" 或 "realtime"，或 tick_seconds 無法解析。
    """
    if mode is None:
        mode = os.environ.get("CONTROL_ANIMATOR_SCHEDULER", "manual")
    mode = mode.lower()

    if mode == "manual":
        logger.info("建立 TickScheduler（手動推進模式）")
        return TickScheduler()

    if mode == "realtime":
        if "tick_seconds" not in kwargs:
            raw = os.environ.get("CONTROL_ANIMATOR_TICK_SECONDS")
            try:
                kwargs["tick_seconds"] = float(raw) if raw else DEFAULT_TICK_SECONDS
            except ValueError as e:
                raise ValueError(
                    f"CONTROL_ANIMATOR_TICK_SECONDS 無法解析為秒數：'{raw}'"
                ) from e
        logger.info("建立 RealtimeTickScheduler（即時模式）")
        return RealtimeTickScheduler(**kwargs)

    raise ValueError(
        f"未知的模式 '{mode}'，請使用 'manual' 或 'realtime'。"
    )


def make_animation(
    target: Any,
    property_name: str,
    *args: Any,
    speed: float = DEFAULT_SPEED,
    **kwargs: Any,
) -> ControlAnimation:
    """依參數形式建立動畫。

    - make_animation(w, "width", 50)：整數範圍
    - make_animation(w, "back_color", Color(0, 0, 255))：顏色
    - make_animation(w, "opacity", 0, 100)：明確範圍

    Args:
        target: 目標元件。
        property_name: 屬性名稱。
        *args: 依形式而定的參數。
        speed: 動畫速度。
        **kwargs: accessor / scheduler。

    Raises:
        TypeError: 若參數形式無法辨識。
    """
    if len(args) == 1:
        (value,) = args
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return ControlAnimation.scalar(target, property_name, value, speed, **kwargs)
        if isinstance(value, Color) or (
            isinstance(value, (tuple, list)) and len(value) == 3
        ):
            return ControlAnimation.color(target, property_name, value, speed, **kwargs)
    elif len(args) == 2 and all(
        isinstance(v, numbers.Real) and not isinstance(v, bool) for v in args
    ):
        return ControlAnimation.normalized(target, property_name, args[0], args[1], speed, **kwargs)

    raise TypeError(
        "無法辨識的動畫參數，請使用 (delta)、(color) 或 (min, max)："
        f"{args!r}"
    )
