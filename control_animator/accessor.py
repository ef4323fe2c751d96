"""屬性存取器 - 依名稱讀寫元件屬性的抽象介面與實作。

定義 AttributeAccessor 抽象基底類別，以及兩種實作：
- ObjectAttributeAccessor：以 getattr / setattr 動態存取任何物件的屬性。
- AccessorTable：在註冊時建立的明確存取表，依元件型別查詢 getter / setter。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from .errors import AttributeAccessError

logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


class AttributeAccessor(ABC):
    """屬性存取器抽象基底類別。

    動畫引擎只透過此介面讀寫目標元件，無法解析的屬性名稱
    必須以 AttributeAccessError 回報。
    """

    @abstractmethod
    def get(self, target: Any, property_name: str) -> Any:
        """讀取目標元件的屬性值。

        Args:
            target: 目標元件。
            property_name: 屬性名稱。

        Returns:
            目前的屬性值。

        Raises:
            AttributeAccessError: 若屬性不存在。
        """

    @abstractmethod
    def set(self, target: Any, property_name: str, value: Any) -> None:
        """寫入目標元件的屬性值。

        Args:
            target: 目標元件。
            property_name: 屬性名稱。
            value: 新的屬性值。

        Raises:
            AttributeAccessError: 若屬性不存在或拒絕此值。
        """


class ObjectAttributeAccessor(AttributeAccessor):
    """以 getattr / setattr 存取屬性的通用存取器。"""

    def get(self, target: Any, property_name: str) -> Any:
        try:
            return getattr(target, property_name)
        except AttributeError as e:
            raise AttributeAccessError(target, property_name, "屬性不存在") from e

    def set(self, target: Any, property_name: str, value: Any) -> None:
        # 只更新既有屬性
        if not hasattr(target, property_name):
            raise AttributeAccessError(target, property_name, "屬性不存在")
        try:
            setattr(target, property_name, value)
        except (AttributeError, TypeError, ValueError) as e:
            raise AttributeAccessError(target, property_name, str(e)) from e


class AccessorTable(AttributeAccessor):
    """明確註冊的屬性存取表。

    每個 (元件型別, 屬性名稱) 對應一組 getter / setter，
    查詢時沿著元件型別的 MRO 尋找，因此子類別可沿用父類別的註冊。

    用法::

        table = AccessorTable()
        table.register(MockWidget, "width", lambda w: w.width, MockWidget.set_width)
        anim = ControlAnimation.scalar(widget, "width", 50, accessor=table)
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[type, str], tuple[Getter, Setter]] = {}

    def register(
        self,
        widget_type: type,
        property_name: str,
        getter: Getter,
        setter: Setter,
    ) -> None:
        """註冊一個屬性的存取方式。

        Args:
            widget_type: 元件型別。
            property_name: 屬性名稱。
            getter: getter(widget) -> value。
            setter: setter(widget, value)。
        """
        self._entries[(widget_type, property_name)] = (getter, setter)
        logger.debug("AccessorTable 註冊：%s.%s", widget_type.__name__, property_name)

    def get(self, target: Any, property_name: str) -> Any:
        getter, _ = self._lookup(target, property_name)
        return getter(target)

    def set(self, target: Any, property_name: str, value: Any) -> None:
        _, setter = self._lookup(target, property_name)
        try:
            setter(target, value)
        except (TypeError, ValueError) as e:
            raise AttributeAccessError(target, property_name, str(e)) from e

    def _lookup(self, target: Any, property_name: str) -> tuple[Getter, Setter]:
        for klass in type(target).__mro__:
            entry = self._entries.get((klass, property_name))
            if entry is not None:
                return entry
        raise AttributeAccessError(target, property_name, "未註冊於存取表")
