"""
异常模块

导出所有自定义异常类，提供统一的异常处理。
"""

from .exceptions import (
    # 基础异常类
    DesignPatternException,
    ErrorSeverity,
    ErrorCategory,

    # 配置异常
    ConfigurationError,
    ConfigValidationError,
    UnknownPlatformError,

    # 文档异常
    DocumentError,
    PropertyTypeError,

    # 工厂异常
    FactoryError,
    FactoryRegistrationError,

    # 工具类
    ExceptionHandler,
)

__all__ = [
    # 基础异常
    'DesignPatternException',
    'ErrorSeverity',
    'ErrorCategory',

    # 配置异常
    'ConfigurationError',
    'ConfigValidationError',
    'UnknownPlatformError',

    # 文档异常
    'DocumentError',
    'PropertyTypeError',

    # 工厂异常
    'FactoryError',
    'FactoryRegistrationError',

    # 工具类
    'ExceptionHandler',
]
