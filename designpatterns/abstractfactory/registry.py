"""
GUI工厂注册管理系统

提供平台枚举、GUI工厂的注册与发现，以及根据平台名称选择工厂的功能。
"""

from typing import Dict, List, Type, Optional, TextIO
from enum import Enum
import logging
import platform as host_platform
import threading

from ..core.exceptions import FactoryError, FactoryRegistrationError, UnknownPlatformError
from ..core.interfaces.gui import GUIFactory


class Platform(Enum):
    """已识别的平台（封闭集合）"""
    WINDOWS = "windows"
    MAC = "mac"

    @classmethod
    def from_name(cls, name: Optional[str]) -> 'Platform':
        """
        将平台名称解析为平台枚举

        名称去除首尾空白、转为小写后与别名集合做精确匹配，
        例如 "Windows"、"win32"、"Mac OS X"、"Darwin"。

        Args:
            name: 平台名称

        Returns:
            对应的平台枚举

        Raises:
            UnknownPlatformError: 当名称无法识别时
        """
        normalized = (name or "").strip().lower()
        for platform, aliases in _PLATFORM_ALIASES.items():
            if normalized in aliases:
                return platform

        raise UnknownPlatformError(
            f"Unknown platform: {name!r}. Available: {[p.value for p in cls]}",
            platform_name=name
        )


_PLATFORM_ALIASES = {
    Platform.WINDOWS: frozenset({"windows", "win32"}),
    Platform.MAC: frozenset({"mac", "macos", "mac os x", "darwin"}),
}


class GUIFactoryRegistry:
    """
    GUI工厂注册管理器

    维护平台到GUI工厂类的映射，支持：
    - 工厂注册和注销
    - 按平台查找工厂类
    - 注册信息的查询

    采用单例模式确保全局唯一性。
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._factories: Dict[Platform, Type[GUIFactory]] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)
        self._initialized = True

    def register_factory(self,
                         platform: Platform,
                         factory_class: Type[GUIFactory]) -> None:
        """
        注册工厂类

        Args:
            platform: 平台
            factory_class: 工厂类

        Raises:
            FactoryRegistrationError: 当平台已注册或工厂类无效时
        """
        with self._lock:
            if platform in self._factories:
                raise FactoryRegistrationError(
                    f"Factory for platform '{platform.value}' already registered"
                )

            if not (isinstance(factory_class, type) and issubclass(factory_class, GUIFactory)):
                raise FactoryRegistrationError(
                    f"Factory class must implement GUIFactory, got {factory_class}"
                )

            self._factories[platform] = factory_class
            self._logger.info(f"Registered GUI factory: {platform.value} -> {factory_class.__name__}")

    def unregister_factory(self, platform: Platform) -> None:
        """
        注销工厂类

        Args:
            platform: 平台
        """
        with self._lock:
            if platform in self._factories:
                del self._factories[platform]
                self._logger.info(f"Unregistered GUI factory: {platform.value}")

    def get_factory_class(self, platform: Platform) -> Type[GUIFactory]:
        """
        获取平台对应的工厂类

        Args:
            platform: 平台

        Returns:
            工厂类

        Raises:
            FactoryError: 当平台没有注册工厂时
        """
        with self._lock:
            if platform not in self._factories:
                raise FactoryError(
                    f"No GUI factory registered for platform '{platform.value}'",
                    context={'platform': platform.value}
                )
            return self._factories[platform]

    def list_platforms(self) -> List[Platform]:
        """列出所有已注册的平台"""
        with self._lock:
            return list(self._factories.keys())

    def is_registered(self, platform: Platform) -> bool:
        """检查平台是否已注册工厂"""
        with self._lock:
            return platform in self._factories

    def clear_registry(self) -> None:
        """
        清空所有注册信息（主要用于测试）
        """
        with self._lock:
            self._factories.clear()
            self._logger.info("Cleared GUI factory registry")


# 全局工厂注册实例
_gui_factory_registry = GUIFactoryRegistry()


def get_gui_factory_registry() -> GUIFactoryRegistry:
    """
    获取全局GUI工厂注册实例

    Returns:
        GUIFactoryRegistry实例
    """
    return _gui_factory_registry


def register_gui_factory(platform: Platform):
    """
    GUI工厂注册装饰器

    Args:
        platform: 平台

    Example:
        @register_gui_factory(Platform.MAC)
        class MacFactory(GUIFactory):
            ...
    """
    def decorator(cls):
        registry = get_gui_factory_registry()
        registry.register_factory(platform, cls)
        cls.platform = platform
        return cls
    return decorator


def detect_platform_name() -> str:
    """获取主机操作系统名称（例如 "Windows"、"Darwin"、"Linux"）"""
    return host_platform.system()


def create_gui_factory(platform_name: str, stream: Optional[TextIO] = None) -> GUIFactory:
    """
    根据平台名称创建GUI工厂

    Args:
        platform_name: 平台名称（不区分大小写）
        stream: 控件绘制时写入的输出流，默认为标准输出

    Returns:
        对应风格族的GUI工厂实例

    Raises:
        UnknownPlatformError: 当平台名称无法识别时
        FactoryError: 当平台已识别但没有注册工厂时
    """
    platform = Platform.from_name(platform_name)
    factory_class = get_gui_factory_registry().get_factory_class(platform)
    return factory_class(stream=stream)
