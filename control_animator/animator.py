"""動畫註冊表 - 以名稱管理與播放 ControlAnimation。"""

from __future__ import annotations

import logging

from .animation import ControlAnimation
from .errors import DuplicateNameError, UnknownNameError

logger = logging.getLogger(__name__)


class Animator:
    """以名稱索引的動畫集合，將 toggle / set_state 轉交給對應動畫。

    用法::

        animator = Animator()
        animator.add("expand", ControlAnimation.scalar(panel, "width", 120))
        animator.toggle("expand")
    """

    def __init__(self) -> None:
        self._anims: dict[str, ControlAnimation] = {}

    def add(self, name: str, anim: ControlAnimation) -> None:
        """加入動畫。

        Raises:
            DuplicateNameError: 若名稱已存在。
        """
        if name in self._anims:
            raise DuplicateNameError(name)
        self._anims[name] = anim
        logger.debug("Animator 加入動畫 '%s'：%r", name, anim)

    def remove(self, name: str) -> None:
        """移除動畫，名稱不存在時不動作。

        移除時停止播放並釋放其計時來源。
        """
        anim = self._anims.pop(name, None)
        if anim is not None:
            anim.release()
            logger.debug("Animator 移除動畫 '%s'", name)

    def get(self, name: str) -> ControlAnimation:
        """取得動畫。

        Raises:
            UnknownNameError: 若名稱不存在。
        """
        try:
            return self._anims[name]
        except KeyError:
            raise UnknownNameError(name) from None

    def names(self) -> list[str]:
        return list(self._anims)

    def toggle(self, name: str, force: bool = False) -> bool:
        """切換動畫狀態，見 ControlAnimation.toggle()。"""
        return self.get(name).toggle(force)

    def set_state(self, name: str, state: bool) -> None:
        """將動畫切換到指定狀態：False = off，True = on。"""
        self.get(name).set_state(state)

    def set_state_raw(self, name: str, state: bool) -> None:
        """設定動畫狀態但不播放，多用於初始化後反轉動畫方向。"""
        self.get(name).set_state_raw(state)

    def __contains__(self, name: object) -> bool:
        return name in self._anims

    def __len__(self) -> int:
        return len(self._anims)
