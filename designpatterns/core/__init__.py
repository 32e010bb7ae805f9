"""
核心抽象层模块

设计模式示例的核心抽象层，提供所有接口和异常的定义。

该模块包含：
- 核心接口定义
- 异常体系

使用示例：
    from designpatterns.core import Document, GUIFactory
    from designpatterns.core import DesignPatternException
"""

# 导入接口定义
from .interfaces import (
    Document,
    Button,
    Checkbox,
    GUIFactory
)

# 导入异常体系
from .exceptions import (
    DesignPatternException,
    ErrorSeverity,
    ErrorCategory,
    ConfigurationError,
    ConfigValidationError,
    UnknownPlatformError,
    DocumentError,
    PropertyTypeError,
    FactoryError,
    FactoryRegistrationError,
    ExceptionHandler,
)

__all__ = [
    # 接口
    'Document',
    'Button',
    'Checkbox',
    'GUIFactory',

    # 异常
    'DesignPatternException',
    'ErrorSeverity',
    'ErrorCategory',
    'ConfigurationError',
    'ConfigValidationError',
    'UnknownPlatformError',
    'DocumentError',
    'PropertyTypeError',
    'FactoryError',
    'FactoryRegistrationError',
    'ExceptionHandler',
]
