"""插值引擎 - 在兩個狀態之間以緩動曲線驅動元件的單一屬性。

ControlAnimation 持有一個動畫的設定與時間狀態：
toggle() / set_state() 切換目標狀態並重新開始計時，
計時來源每次回呼 tick() 時推進時間游標、計算緩動值並寫回目標屬性。
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Sequence

from .accessor import AttributeAccessor, ObjectAttributeAccessor
from .color import Color
from .easing import DURATION
from .errors import AttributeAccessError
from .tick_source import TickScheduler, TickSource
from .value_kinds import ColorRange, NormalizedRange, ScalarRange, ValueKind

logger = logging.getLogger(__name__)

DEFAULT_SPEED = 0.4
TICK_INTERVAL = 1

_default_scheduler: TickScheduler | None = None


def get_default_scheduler() -> TickScheduler:
    """取得模組共用的預設排程器。"""
    global _default_scheduler
    if _default_scheduler is None:
        _default_scheduler = TickScheduler()
    return _default_scheduler


class ControlAnimation:
    """單一元件屬性的動畫。

    請使用 scalar() / color() / normalized() 建立，
    值域種類在建構後不可變更。

    用法::

        anim = ControlAnimation.scalar(widget, "width", 50)
        anim.toggle()       # 往 on 狀態移動
        scheduler.tick()    # 由計時來源驅動

    Attributes:
        speed: 每次 tick 推進的時間量，越大越快。
    """

    def __init__(
        self,
        target: Any,
        property_name: str,
        value_kind: ValueKind,
        speed: float = DEFAULT_SPEED,
        accessor: AttributeAccessor | None = None,
        scheduler: TickScheduler | None = None,
    ) -> None:
        if speed <= 0:
            raise ValueError(f"speed 必須為正數，收到 {speed}")
        self._target = target
        self._property_name = property_name
        self._value_kind = value_kind
        self.speed = speed
        self._accessor = accessor or ObjectAttributeAccessor()
        self._scheduler = scheduler or get_default_scheduler()
        self._tick_source: TickSource | None = None
        self._elapsed = 0.0
        self._state = False

        logger.info(
            "ControlAnimation 已建立：%s.%s，種類=%s，speed=%.2f",
            type(target).__name__,
            property_name,
            type(value_kind).__name__,
            speed,
        )

    # ── 建構 ─────────────────────────────────────────────

    @classmethod
    def scalar(
        cls,
        target: Any,
        property_name: str,
        delta: int,
        speed: float = DEFAULT_SPEED,
        *,
        accessor: AttributeAccessor | None = None,
        scheduler: TickScheduler | None = None,
    ) -> ControlAnimation:
        """建立整數範圍動畫，以目前屬性值為起點。

        Args:
            target: 目標元件。
            property_name: 屬性名稱（如 "width"、"left"）。
            delta: 變化量，動畫在起點與起點 + delta 之間來回。
            speed: 動畫速度。

        Raises:
            AttributeAccessError: 若屬性不存在或不是可轉為整數的數值。
        """
        accessor = accessor or ObjectAttributeAccessor()
        current = accessor.get(target, property_name)
        if isinstance(current, bool) or not isinstance(current, numbers.Real):
            raise AttributeAccessError(
                target, property_name, f"型別 {type(current).__name__} 無法轉換為整數"
            )
        value_kind = ScalarRange(
            base_value=int(current), delta=delta, native_type=type(current)
        )
        return cls(target, property_name, value_kind, speed, accessor, scheduler)

    @classmethod
    def color(
        cls,
        target: Any,
        property_name: str,
        target_color: Color | Sequence[int],
        speed: float = DEFAULT_SPEED,
        *,
        accessor: AttributeAccessor | None = None,
        scheduler: TickScheduler | None = None,
    ) -> ControlAnimation:
        """建立顏色動畫，以目前顏色為起點、target_color 為終點。

        Raises:
            AttributeAccessError: 若屬性不存在或目前值不是三通道顏色。
        """
        accessor = accessor or ObjectAttributeAccessor()
        current = accessor.get(target, property_name)
        try:
            color_a = Color.from_value(current)
        except (TypeError, ValueError) as e:
            raise AttributeAccessError(target, property_name, str(e)) from e
        value_kind = ColorRange(color_a=color_a, color_b=Color.from_value(target_color))
        return cls(target, property_name, value_kind, speed, accessor, scheduler)

    @classmethod
    def normalized(
        cls,
        target: Any,
        property_name: str,
        minimum: float,
        maximum: float,
        speed: float = DEFAULT_SPEED,
        *,
        accessor: AttributeAccessor | None = None,
        scheduler: TickScheduler | None = None,
    ) -> ControlAnimation:
        """建立明確範圍動畫，不讀取目前屬性值。

        寫回值為插值結果除以 100，例如 (0, 100) 產生 0.0~1.0。
        """
        value_kind = NormalizedRange(range_min=minimum, range_max=maximum)
        return cls(target, property_name, value_kind, speed, accessor, scheduler)

    # ── 屬性 ─────────────────────────────────────────────

    @property
    def target(self) -> Any:
        """動畫所驅動的元件。"""
        return self._target

    @property
    def property_name(self) -> str:
        """動畫所驅動的屬性名稱。"""
        return self._property_name

    @property
    def value_kind(self) -> ValueKind:
        return self._value_kind

    @property
    def elapsed(self) -> float:
        """時間游標，0~DURATION。"""
        return self._elapsed

    @property
    def state(self) -> bool:
        """目前的邏輯狀態：False = off，True = on。"""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._tick_source is not None and self._tick_source.is_running

    # ── 控制 ─────────────────────────────────────────────

    def toggle(self, force: bool = False) -> bool:
        """在兩個狀態之間切換。

        動畫進行中時預設不重新開始，避免畫面跳動；
        force=True 會立即從頭開始，反應較快但轉場可能不連續。

        Args:
            force: 即使正在播放也強制重新開始。

        Returns:
            是否實際重新開始。
        """
        if self.is_running and not force:
            logger.debug("%s.%s 播放中，忽略 toggle", type(self._target).__name__, self._property_name)
            return False

        self._state = not self._state
        self._elapsed = 0.0
        if self._tick_source is None:
            self._tick_source = self._scheduler.source_for(self)
        self._tick_source.start(TICK_INTERVAL, self.tick)
        logger.debug(
            "%s.%s 開始播放：state=%s",
            type(self._target).__name__,
            self._property_name,
            self._state,
        )
        return True

    def set_state(self, state: bool) -> None:
        """切換到指定狀態，已是該狀態時不動作。"""
        if self._state != state:
            self.toggle(force=True)

    def set_state_raw(self, state: bool) -> None:
        """直接設定狀態而不播放動畫。

        用於初始化後同步外部狀態，例如元件一開始就呈現 on 的外觀。
        """
        self._state = state

    def tick(self) -> None:
        """推進時間游標並套用目前的緩動值。

        時間到達 DURATION 時停止計時來源，最後一次仍會寫回數值。

        Raises:
            AttributeAccessError: 若寫回屬性失敗。
        """
        self._elapsed = min(self._elapsed + self.speed, DURATION)
        if self._elapsed >= DURATION:
            if self._tick_source is not None:
                self._tick_source.stop()
            logger.debug("%s.%s 播放完畢", type(self._target).__name__, self._property_name)

        value = self._value_kind.value_at(self._elapsed, self._state)
        self._accessor.set(self._target, self._property_name, value)

    def release(self) -> None:
        """停止播放並從排程器移除此動畫的計時來源。

        之後再呼叫 toggle() 會重新向排程器取得計時來源。
        """
        self._scheduler.release(self)
        self._tick_source = None
        logger.debug("%s.%s 已釋放", type(self._target).__name__, self._property_name)

    def __repr__(self) -> str:
        return (
            f"ControlAnimation({type(self._target).__name__}.{self._property_name}, "
            f"{type(self._value_kind).__name__}, state={self._state}, "
            f"elapsed={self._elapsed:.2f})"
        )
