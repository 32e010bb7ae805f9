"""
具体GUI工厂实现

每个工厂创建同一风格族的按钮和复选框，并在导入时注册到全局注册表。
"""

from typing import Optional, TextIO

from ..core.interfaces.gui import Button, Checkbox, GUIFactory
from .registry import Platform, get_gui_factory_registry, register_gui_factory
from .widgets import MacButton, MacCheckbox, WinButton, WinCheckbox


class StreamBoundFactory(GUIFactory):
    """将输出流传递给所创建控件的工厂基类"""

    platform: Platform

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream


@register_gui_factory(Platform.WINDOWS)
class WinFactory(StreamBoundFactory):
    """创建Windows风格按钮和复选框的工厂"""

    def create_button(self) -> Button:
        return WinButton(stream=self._stream)

    def create_checkbox(self) -> Checkbox:
        return WinCheckbox(stream=self._stream)


@register_gui_factory(Platform.MAC)
class MacFactory(StreamBoundFactory):
    """创建Mac风格按钮和复选框的工厂"""

    def create_button(self) -> Button:
        return MacButton(stream=self._stream)

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox(stream=self._stream)


DEFAULT_FACTORIES = {
    Platform.WINDOWS: WinFactory,
    Platform.MAC: MacFactory,
}


def register_default_factories() -> None:
    """重新注册内置工厂（清空注册表之后使用）"""
    registry = get_gui_factory_registry()
    for platform, factory_class in DEFAULT_FACTORIES.items():
        if not registry.is_registered(platform):
            registry.register_factory(platform, factory_class)
