"""
设计模式示例自定义异常体系

定义了示例中所有自定义异常类，提供详细的错误信息和处理机制。
"""

import logging
from typing import Optional, Dict, Any, NoReturn
from enum import Enum


def _type_name(type_spec) -> str:
    """类型或类型元组的可读名称"""
    if isinstance(type_spec, tuple):
        return " | ".join(t.__name__ for t in type_spec)
    return type_spec.__name__


class ErrorSeverity(Enum):
    """错误严重程度枚举"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """错误类别枚举"""
    CONFIGURATION = "configuration"
    DOCUMENT = "document"
    FACTORY = "factory"
    SYSTEM = "system"


class DesignPatternException(Exception):
    """
    设计模式示例基础异常类

    携带错误代码、严重程度、类别和上下文，便于日志记录。
    原因异常通过 ``raise ... from`` 链接时自动取自 ``__cause__``。
    """

    def __init__(self,
                 message: str,
                 error_code: Optional[str] = None,
                 severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                 category: ErrorCategory = ErrorCategory.SYSTEM,
                 context: Optional[Dict[str, Any]] = None):
        """
        Args:
            message: 错误消息
            error_code: 错误代码，默认为 "<类别>_<类名>"
            severity: 错误严重程度
            category: 错误类别
            context: 错误上下文信息
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.category = category
        self.context = dict(context) if context else {}
        self.error_code = error_code or f"{category.value.upper()}_{type(self).__name__.upper()}"

    def to_dict(self) -> Dict[str, Any]:
        """用于结构化日志的字典表示"""
        cause = self.__cause__
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context,
            "cause": repr(cause) if cause is not None else None,
        }

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append("Context: " + ", ".join(f"{k}={v}" for k, v in self.context.items()))
        if self.__cause__ is not None:
            parts.append(f"Caused by: {self.__cause__}")
        return " | ".join(parts)


# =============================================================================
# 配置相关异常
# =============================================================================

class ConfigurationError(DesignPatternException):
    """配置相关错误基类"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.CONFIGURATION,
            **kwargs
        )


class ConfigValidationError(ConfigurationError):
    """配置验证错误"""
    pass


class UnknownPlatformError(ConfigurationError):
    """平台名称无法识别"""

    def __init__(self, message: str, platform_name: Optional[str] = None, **kwargs):
        context = kwargs.pop('context', {})
        context['platform_name'] = platform_name

        super().__init__(message, context=context, **kwargs)
        self.platform_name = platform_name


# =============================================================================
# 文档相关异常
# =============================================================================

class DocumentError(DesignPatternException):
    """文档相关错误基类"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            category=ErrorCategory.DOCUMENT,
            **kwargs
        )


class PropertyTypeError(DocumentError, TypeError):
    """属性值无法收窄为请求的类型"""

    def __init__(self,
                 message: str,
                 key: Optional[str] = None,
                 expected_type: Optional[type] = None,
                 actual_type: Optional[type] = None,
                 **kwargs):
        context = kwargs.pop('context', {})
        if key is not None:
            context['key'] = key
        if expected_type is not None:
            context['expected_type'] = _type_name(expected_type)
        if actual_type is not None:
            context['actual_type'] = _type_name(actual_type)

        super().__init__(
            message,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            **kwargs
        )
        self.key = key
        self.expected_type = expected_type
        self.actual_type = actual_type


# =============================================================================
# 工厂相关异常
# =============================================================================

class FactoryError(DesignPatternException):
    """工厂相关错误基类"""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            category=ErrorCategory.FACTORY,
            **kwargs
        )


class FactoryRegistrationError(FactoryError):
    """工厂注册错误"""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, severity=ErrorSeverity.MEDIUM, **kwargs)


# =============================================================================
# 异常处理工具类
# =============================================================================

class ExceptionHandler:
    """在入口处记录示例异常后继续向上抛出"""

    @staticmethod
    def handle_exception(exception: DesignPatternException,
                         logger: logging.Logger) -> NoReturn:
        """
        记录异常的结构化信息并重新抛出

        Args:
            exception: 示例异常实例
            logger: 日志记录器

        Raises:
            DesignPatternException: 总是重新抛出传入的异常
        """
        logger.error(f"{type(exception).__name__}: {exception.to_dict()}")
        raise exception
