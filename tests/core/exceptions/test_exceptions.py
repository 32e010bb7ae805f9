"""
异常体系测试
"""

import unittest
from unittest.mock import Mock

from designpatterns.core.exceptions import (
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
    ExceptionHandler
)


class TestDesignPatternException(unittest.TestCase):

    def test_basic_exception_creation(self):
        """测试基础异常创建"""
        exc = DesignPatternException("Test error message")

        self.assertEqual(exc.message, "Test error message")
        self.assertEqual(exc.severity, ErrorSeverity.MEDIUM)
        self.assertEqual(exc.category, ErrorCategory.SYSTEM)
        self.assertEqual(exc.context, {})
        self.assertIsNone(exc.to_dict()["cause"])

    def test_error_code_generation(self):
        """测试错误代码自动生成"""
        exc = DesignPatternException("Test error")
        self.assertEqual(exc.error_code, "SYSTEM_DESIGNPATTERNEXCEPTION")

    def test_string_includes_context_and_chained_cause(self):
        """测试字符串包含上下文和链接的原因异常"""
        try:
            try:
                raise ValueError("Original error")
            except ValueError as cause:
                raise DesignPatternException(
                    message="Test error",
                    error_code="TEST_001",
                    context={"key": "model"}
                ) from cause
        except DesignPatternException as exc:
            message = str(exc)
            exc_dict = exc.to_dict()

        self.assertEqual(
            message,
            "[TEST_001] Test error | Context: key=model | Caused by: Original error"
        )
        self.assertEqual(exc_dict["cause"], "ValueError('Original error')")

    def test_context_is_copied(self):
        """测试上下文字典被复制"""
        context = {"key": "model"}
        exc = DesignPatternException("Test error", context=context)
        exc.context["extra"] = 1
        self.assertEqual(context, {"key": "model"})

    def test_to_dict(self):
        """测试转换为字典"""
        exc = DesignPatternException(
            message="Test error",
            error_code="TEST_001",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.DOCUMENT,
            context={"test": "value"}
        )

        exc_dict = exc.to_dict()

        self.assertEqual(exc_dict["error_code"], "TEST_001")
        self.assertEqual(exc_dict["severity"], "high")
        self.assertEqual(exc_dict["category"], "document")
        self.assertEqual(exc_dict["context"], {"test": "value"})
        self.assertIsNone(exc_dict["cause"])
        self.assertNotIn("traceback", exc_dict)


class TestSpecificExceptions(unittest.TestCase):

    def test_configuration_error(self):
        """测试配置错误"""
        exc = ConfigurationError("Invalid config")

        self.assertEqual(exc.severity, ErrorSeverity.HIGH)
        self.assertEqual(exc.category, ErrorCategory.CONFIGURATION)
        self.assertIn("CONFIGURATION", exc.error_code)

    def test_config_validation_error_is_configuration_error(self):
        """测试配置验证错误继承关系"""
        exc = ConfigValidationError("Bad value")
        self.assertIsInstance(exc, ConfigurationError)
        self.assertEqual(exc.error_code, "CONFIGURATION_CONFIGVALIDATIONERROR")

    def test_unknown_platform_error(self):
        """测试未知平台错误"""
        exc = UnknownPlatformError("Unknown OS", platform_name="linux")

        self.assertIsInstance(exc, ConfigurationError)
        self.assertEqual(exc.platform_name, "linux")
        self.assertEqual(exc.context["platform_name"], "linux")
        self.assertEqual(exc.severity, ErrorSeverity.HIGH)

    def test_property_type_error(self):
        """测试属性类型错误"""
        exc = PropertyTypeError("mismatch", key="model", expected_type=str, actual_type=int)

        self.assertIsInstance(exc, DocumentError)
        self.assertIsInstance(exc, TypeError)
        self.assertEqual(exc.category, ErrorCategory.DOCUMENT)
        self.assertEqual(exc.context, {
            "key": "model",
            "expected_type": "str",
            "actual_type": "int"
        })

    def test_property_type_error_with_type_tuple(self):
        """测试类型元组的上下文名称"""
        exc = PropertyTypeError("mismatch", expected_type=(int, float))
        self.assertEqual(exc.context["expected_type"], "int | float")

    def test_factory_registration_error(self):
        """测试工厂注册错误"""
        exc = FactoryRegistrationError("Duplicate")

        self.assertIsInstance(exc, FactoryError)
        self.assertEqual(exc.category, ErrorCategory.FACTORY)
        self.assertEqual(exc.severity, ErrorSeverity.MEDIUM)


class TestExceptionHandler(unittest.TestCase):

    def test_handle_exception_logs_and_reraises(self):
        """测试记录结构化信息后重新抛出同一个异常"""
        exc = UnknownPlatformError("Unknown OS", platform_name="beos")
        logger = Mock()

        with self.assertRaises(UnknownPlatformError) as ctx:
            ExceptionHandler.handle_exception(exc, logger)

        self.assertIs(ctx.exception, exc)
        logger.error.assert_called_once()
        logged = logger.error.call_args[0][0]
        self.assertIn("UnknownPlatformError", logged)
        self.assertIn("'platform_name': 'beos'", logged)


if __name__ == '__main__':
    unittest.main()
