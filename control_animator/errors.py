"""例外類別 - 動畫引擎與註冊表的錯誤分類。"""

from __future__ import annotations


class AnimatorError(Exception):
    """control_animator 所有例外的基底類別。"""


class AttributeAccessError(AnimatorError, AttributeError):
    """目標元件上不存在該屬性，或屬性值型別無法轉換。

    由屬性存取器在建構動畫或套用數值時拋出，直接傳遞給呼叫端。
    """

    def __init__(self, target: object, property_name: str, reason: str = "") -> None:
        self.target = target
        self.property_name = property_name
        self.reason = reason
        message = f"無法存取 {type(target).__name__}.{property_name}"
        if reason:
            message = f"{message}：{reason}"
        super().__init__(message)


class UnknownNameError(AnimatorError, KeyError):
    """註冊表中找不到指定名稱的動畫。"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"未註冊的動畫名稱 '{self.name}'"


class DuplicateNameError(AnimatorError, KeyError):
    """動畫名稱已被使用。"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"動畫名稱 '{self.name}' 已存在"
