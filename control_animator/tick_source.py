"""計時來源 - 週期性回呼的抽象介面與共用排程器。

定義 TickSource 抽象基底類別，以及：
- TickScheduler：單一共用排程器，以動畫身分為鍵註冊回呼，每次 tick() 推進一個單位。
- ScheduledTickSource：TickScheduler 上的一個回呼槽，實作 TickSource。
- RealtimeTickScheduler：在呼叫端執行緒上以固定間隔（秒）持續推進。

所有回呼都在同一個執行緒上依序執行，不需要鎖。
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Hashable

logger = logging.getLogger(__name__)


class TickSource(ABC):
    """計時來源抽象基底類別。"""

    @abstractmethod
    def start(self, interval: int, on_tick: Callable[[], None]) -> None:
        """開始週期性呼叫 on_tick。

        已在執行中時重新開始計數。

        Args:
            interval: 間隔（排程器單位），至少為 1。
            on_tick: 每次到期時呼叫的回呼。
        """

    @abstractmethod
    def stop(self) -> None:
        """停止回呼。"""

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """是否正在執行。"""


class ScheduledTickSource(TickSource):
    """TickScheduler 上的一個回呼槽。"""

    def __init__(self, scheduler: TickScheduler, key: Hashable) -> None:
        self._scheduler = scheduler
        self._key = key
        self._interval = 1
        self._on_tick: Callable[[], None] | None = None
        self._countdown = 0
        self._running = False

    @property
    def key(self) -> Hashable:
        return self._key

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self, interval: int, on_tick: Callable[[], None]) -> None:
        if interval < 1:
            raise ValueError(f"interval 必須至少為 1，收到 {interval}")
        self._interval = interval
        self._on_tick = on_tick
        self._countdown = interval
        self._running = True
        self._scheduler._activate(self)

    def stop(self) -> None:
        self._running = False
        self._scheduler._deactivate(self)

    def _advance(self) -> bool:
        """推進一個單位，到期時呼叫回呼並回傳 True。"""
        if not self._running or self._on_tick is None:
            return False
        self._countdown -= 1
        if self._countdown > 0:
            return False
        self._countdown = self._interval
        self._on_tick()
        return True


class TickScheduler:
    """單一共用排程器。

    每個動畫以自身身分為鍵取得一個 ScheduledTickSource，
    排程器只保留正在執行的來源，不會為每個動畫各建一個計時器。

    用法::

        scheduler = TickScheduler()
        source = scheduler.source_for(anim)
        source.start(1, anim.tick)

        # 在主迴圈中每幀呼叫
        scheduler.tick()
    """

    def __init__(self) -> None:
        self._sources: dict[Hashable, ScheduledTickSource] = {}
        self._active: dict[Hashable, ScheduledTickSource] = {}
        self._tick_count = 0

    def source_for(self, key: Hashable) -> ScheduledTickSource:
        """取得（必要時建立）key 對應的計時來源。"""
        source = self._sources.get(key)
        if source is None:
            source = ScheduledTickSource(self, key)
            self._sources[key] = source
        return source

    def release(self, key: Hashable) -> None:
        """停止並移除 key 對應的計時來源，未知的 key 直接忽略。"""
        source = self._sources.pop(key, None)
        if source is not None:
            source.stop()

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def is_idle(self) -> bool:
        return not self._active

    def tick(self) -> int:
        """推進一個單位，依註冊順序呼叫到期的回呼。

        回呼內停止自己或啟動其他來源都是安全的；
        本次 tick 中新加入的來源從下一次 tick 開始計數。
        某個回呼拋出例外時，其餘到期的回呼仍會執行，之後再拋出第一個例外。

        Returns:
            本次觸發的回呼數。
        """
        self._tick_count += 1
        fired = 0
        first_error: Exception | None = None
        for source in list(self._active.values()):
            try:
                if source._advance():
                    fired += 1
            except Exception as e:
                if first_error is None:
                    first_error = e
                else:
                    logger.exception("回呼 %r 發生錯誤", source.key)
        if first_error is not None:
            raise first_error
        return fired

    def run_until_idle(self, max_ticks: int | None = None) -> int:
        """持續推進直到沒有執行中的來源。

        Args:
            max_ticks: 最多推進的次數，None 表示不限。

        Returns:
            實際推進的次數。
        """
        ticks = 0
        while self._active and (max_ticks is None or ticks < max_ticks):
            self.tick()
            ticks += 1
            self._wait()
        return ticks

    def _wait(self) -> None:
        """兩次 tick 之間的等待，手動排程器不等待。"""

    def _activate(self, source: ScheduledTickSource) -> None:
        self._active[source.key] = source

    def _deactivate(self, source: ScheduledTickSource) -> None:
        self._active.pop(source.key, None)


class RealtimeTickScheduler(TickScheduler):
    """以真實時間推進的排程器。

    run_until_idle() 每次 tick 之後休眠 tick_seconds，
    在呼叫端執行緒上執行，適合終端 Demo 或沒有事件迴圈的腳本。

    Args:
        tick_seconds: 每個排程器單位對應的秒數。
    """

    def __init__(self, tick_seconds: float = 0.001) -> None:
        super().__init__()
        if tick_seconds < 0:
            raise ValueError(f"tick_seconds 不可為負，收到 {tick_seconds}")
        self._tick_seconds = tick_seconds
        self._next_deadline: float | None = None
        logger.info("RealtimeTickScheduler 已初始化：tick=%.4fs", tick_seconds)

    @property
    def tick_seconds(self) -> float:
        return self._tick_seconds

    def run_until_idle(self, max_ticks: int | None = None) -> int:
        self._next_deadline = time.monotonic()
        try:
            return super().run_until_idle(max_ticks)
        finally:
            self._next_deadline = None

    def _wait(self) -> None:
        if self._next_deadline is None:
            return
        # 累計截止時間
        self._next_deadline += self._tick_seconds
        remaining = self._next_deadline - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)
