"""
核心接口模块

导出所有核心接口定义，提供统一的接口访问。
"""

from .document import Document

from .gui import (
    Button,
    Checkbox,
    GUIFactory
)

__all__ = [
    # 文档接口
    'Document',

    # GUI工厂接口
    'Button',
    'Checkbox',
    'GUIFactory',
]
