"""Control Animator - 終端 Demo。

建立一個 MockWidget，註冊寬度、背景色與不透明度三個動畫，
以即時排程器播放並在終端中顯示元件的變化。

執行方式::

    python -m control_animator.main
"""

from __future__ import annotations

import logging

from .animator import Animator
from .color import Color
from .factory import create_scheduler, make_animation
from .mock_widget import MockWidget

logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
)
logger = logging.getLogger(__name__)

# ANSI 色碼
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"


def render_widget(widget: MockWidget) -> str:
    """以背景色方塊繪製元件寬度，並附上屬性值。"""
    r, g, b = widget.back_color
    cells = max(widget.width // 10, 0)
    bar = f"\033[48;2;{r};{g};{b}m{' ' * cells}{RESET}"
    return (
        f"{bar} {DIM}width={widget.width:<4d} "
        f"color={widget.back_color.to_hex()} opacity={widget.opacity:.2f}{RESET}"
    )


def play(animator: Animator, scheduler, widget: MockWidget, label: str) -> None:
    """播放到所有動畫停止，每 5 個 tick 重繪一次。"""
    print(f"{BOLD}{label}{RESET}")
    while not scheduler.is_idle:
        scheduler.run_until_idle(max_ticks=5)
        print("\r" + render_widget(widget), end="", flush=True)
    print()


def main() -> None:
    scheduler = create_scheduler("realtime", tick_seconds=0.01)
    widget = MockWidget("panel", width=200, back_color=Color(200, 40, 40), opacity=0.0)

    animator = Animator()
    animator.add("grow", make_animation(widget, "width", 400, scheduler=scheduler))
    animator.add(
        "recolor",
        make_animation(widget, "back_color", Color(40, 80, 220), scheduler=scheduler),
    )
    animator.add("fade", make_animation(widget, "opacity", 0, 100, scheduler=scheduler))

    print(render_widget(widget))

    animator.toggle("grow")
    animator.toggle("recolor")
    animator.toggle("fade")
    play(animator, scheduler, widget, "展開")

    for name in animator.names():
        animator.set_state(name, False)
    play(animator, scheduler, widget, "收合")

    # 元件已呈現 on 的外觀時，只同步狀態不播放
    widget.width = 600
    animator.set_state_raw("grow", True)
    animator.toggle("grow")
    play(animator, scheduler, widget, "同步狀態後收合")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print()
