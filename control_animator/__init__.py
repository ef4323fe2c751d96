"""Control Animator - 以緩動曲線驅動 UI 元件屬性的動畫引擎。"""

from .accessor import AccessorTable, AttributeAccessor, ObjectAttributeAccessor
from .animation import ControlAnimation, get_default_scheduler
from .animator import Animator
from .color import Color
from .easing import DURATION, clamp, ease_in_out_cubic
from .errors import (
    AnimatorError,
    AttributeAccessError,
    DuplicateNameError,
    UnknownNameError,
)
from .factory import create_scheduler, make_animation
from .mock_widget import MockWidget
from .tick_source import (
    RealtimeTickScheduler,
    ScheduledTickSource,
    TickScheduler,
    TickSource,
)
from .value_kinds import ColorRange, NormalizedRange, ScalarRange

__all__ = [
    "AccessorTable",
    "Animator",
    "AnimatorError",
    "AttributeAccessError",
    "AttributeAccessor",
    "clamp",
    "Color",
    "ColorRange",
    "ControlAnimation",
    "create_scheduler",
    "DuplicateNameError",
    "DURATION",
    "ease_in_out_cubic",
    "get_default_scheduler",
    "make_animation",
    "MockWidget",
    "NormalizedRange",
    "ObjectAttributeAccessor",
    "RealtimeTickScheduler",
    "ScalarRange",
    "ScheduledTickSource",
    "TickScheduler",
    "TickSource",
    "UnknownNameError",
]
