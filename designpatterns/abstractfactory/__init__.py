"""
抽象工厂模式实现模块

根据运行时的平台名称选择一组风格一致的GUI控件。
包含以下核心组件：

- Platform: 已识别平台的枚举
- GUIFactoryRegistry: 平台到工厂类的注册管理
- WinFactory / MacFactory: 两个具体风格族的工厂
- Application: 使用工厂创建并绘制控件的应用
"""

from .registry import (
    Platform,
    GUIFactoryRegistry,
    get_gui_factory_registry,
    register_gui_factory,
    create_gui_factory,
    detect_platform_name
)
from .widgets import WinButton, WinCheckbox, MacButton, MacCheckbox
from .factories import WinFactory, MacFactory, register_default_factories
from .application import Application

__all__ = [
    'Platform',
    'GUIFactoryRegistry',
    'get_gui_factory_registry',
    'register_gui_factory',
    'create_gui_factory',
    'detect_platform_name',
    'WinButton',
    'WinCheckbox',
    'MacButton',
    'MacCheckbox',
    'WinFactory',
    'MacFactory',
    'register_default_factories',
    'Application',
]
