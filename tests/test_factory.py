"""測試 create_scheduler() 與 make_animation()。"""

import pytest

from control_animator.color import Color
from control_animator.factory import create_scheduler, make_animation
from control_animator.mock_widget import MockWidget
from control_animator.tick_source import RealtimeTickScheduler, TickScheduler
from control_animator.value_kinds import ColorRange, NormalizedRange, ScalarRange


class TestCreateScheduler:
    """測試排程器工廠。"""

    def test_default_manual(self, monkeypatch):
        monkeypatch.delenv("CONTROL_ANIMATOR_SCHEDULER", raising=False)
        scheduler = create_scheduler()
        assert type(scheduler) is TickScheduler

    def test_explicit_realtime(self, monkeypatch):
        monkeypatch.delenv("CONTROL_ANIMATOR_TICK_SECONDS", raising=False)
        scheduler = create_scheduler("realtime")
        assert isinstance(scheduler, RealtimeTickScheduler)
        assert scheduler.tick_seconds == pytest.approx(0.001)

    def test_mode_from_env(self, monkeypatch):
        monkeypatch.setenv("CONTROL_ANIMATOR_SCHEDULER", "REALTIME")
        monkeypatch.setenv("CONTROL_ANIMATOR_TICK_SECONDS", "0.05")
        scheduler = create_scheduler()
        assert isinstance(scheduler, RealtimeTickScheduler)
        assert scheduler.tick_seconds == pytest.approx(0.05)

    def test_kwargs_override_env(self, monkeypatch):
        monkeypatch.setenv("CONTROL_ANIMATOR_TICK_SECONDS", "0.05")
        scheduler = create_scheduler("realtime", tick_seconds=0.2)
        assert scheduler.tick_seconds == pytest.approx(0.2)

    def test_bad_tick_seconds(self, monkeypatch):
        monkeypatch.setenv("CONTROL_ANIMATOR_TICK_SECONDS", "fast")
        with pytest.raises(ValueError):
            create_scheduler("realtime")

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="threaded"):
            create_scheduler("threaded")


class TestMakeAnimation:
    """測試依參數形式建立動畫。"""

    @pytest.fixture()
    def widget(self) -> MockWidget:
        return MockWidget(width=100)

    @pytest.fixture()
    def scheduler(self) -> TickScheduler:
        return TickScheduler()

    def test_scalar(self, widget, scheduler):
        anim = make_animation(widget, "width", 50, scheduler=scheduler)
        assert isinstance(anim.value_kind, ScalarRange)

    def test_color(self, widget, scheduler):
        anim = make_animation(widget, "back_color", Color(0, 0, 255), scheduler=scheduler)
        assert isinstance(anim.value_kind, ColorRange)

    def test_color_tuple(self, widget, scheduler):
        anim = make_animation(widget, "back_color", (0, 0, 255), scheduler=scheduler)
        assert isinstance(anim.value_kind, ColorRange)

    def test_normalized(self, widget, scheduler):
        anim = make_animation(widget, "opacity", 0, 100, scheduler=scheduler)
        assert isinstance(anim.value_kind, NormalizedRange)

    def test_speed(self, widget, scheduler):
        anim = make_animation(widget, "width", 50, speed=2.0, scheduler=scheduler)
        assert anim.speed == pytest.approx(2.0)

    @pytest.mark.parametrize("args", [(), ("50",), (True,), (1.5,), (0, 1, 2), ("a", "b")])
    def test_unrecognized(self, widget, scheduler, args):
        with pytest.raises(TypeError):
            make_animation(widget, "width", *args, scheduler=scheduler)
