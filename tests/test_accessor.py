"""測試屬性存取器實作。"""

import pytest

from control_animator.accessor import AccessorTable, AttributeAccessor, ObjectAttributeAccessor
from control_animator.color import Color
from control_animator.errors import AttributeAccessError
from control_animator.mock_widget import MockWidget


class Panel:
    def __init__(self):
        self._width = 80

    def get_width(self):
        return self._width

    def set_width(self, value):
        if value < 0:
            raise ValueError("寬度不可為負")
        self._width = value


class ScrollPanel(Panel):
    pass


class TestInterfaceInheritance:
    """測試繼承關係。"""

    def test_object_accessor(self):
        assert isinstance(ObjectAttributeAccessor(), AttributeAccessor)

    def test_accessor_table(self):
        assert isinstance(AccessorTable(), AttributeAccessor)


class TestObjectAttributeAccessor:
    """測試 getattr / setattr 存取器。"""

    def test_get(self):
        widget = MockWidget(width=42)
        assert ObjectAttributeAccessor().get(widget, "width") == 42

    def test_set(self):
        widget = MockWidget()
        ObjectAttributeAccessor().set(widget, "back_color", Color(1, 2, 3))
        assert widget.back_color == Color(1, 2, 3)

    def test_get_missing(self):
        with pytest.raises(AttributeAccessError) as excinfo:
            ObjectAttributeAccessor().get(MockWidget(), "depth")
        assert excinfo.value.property_name == "depth"
        assert "MockWidget.depth" in str(excinfo.value)

    def test_set_missing_does_not_create(self):
        widget = MockWidget()
        with pytest.raises(AttributeAccessError):
            ObjectAttributeAccessor().set(widget, "depth", 3)
        assert not hasattr(widget, "depth")

    def test_set_rejected_value(self):
        """setter 拒絕值時轉為 AttributeAccessError。"""
        with pytest.raises(AttributeAccessError):
            ObjectAttributeAccessor().set(MockWidget(), "back_color", (1, 2, 3))

    def test_error_is_attribute_error(self):
        with pytest.raises(AttributeError):
            ObjectAttributeAccessor().get(MockWidget(), "depth")


class TestAccessorTable:
    """測試明確註冊的存取表。"""

    @pytest.fixture()
    def table(self) -> AccessorTable:
        t = AccessorTable()
        t.register(Panel, "width", Panel.get_width, Panel.set_width)
        return t

    def test_get_and_set(self, table):
        panel = Panel()
        assert table.get(panel, "width") == 80
        table.set(panel, "width", 120)
        assert panel.get_width() == 120

    def test_subclass_uses_parent_entry(self, table):
        panel = ScrollPanel()
        table.set(panel, "width", 10)
        assert table.get(panel, "width") == 10

    def test_subclass_override(self, table):
        table.register(ScrollPanel, "width", lambda p: -1, Panel.set_width)
        assert table.get(ScrollPanel(), "width") == -1
        assert table.get(Panel(), "width") == 80

    def test_unregistered(self, table):
        with pytest.raises(AttributeAccessError):
            table.get(Panel(), "height")
        with pytest.raises(AttributeAccessError):
            table.set(Panel(), "height", 3)

    def test_unregistered_type(self, table):
        with pytest.raises(AttributeAccessError):
            table.get(MockWidget(), "width")

    def test_setter_rejects(self, table):
        with pytest.raises(AttributeAccessError):
            table.set(Panel(), "width", -5)
