"""
文档接口定义

定义了抽象文档模式的标准接口：一个无模式的键值存储，
支持非类型化读取和按类型收窄的读取。
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Type, TypeVar


T = TypeVar('T')  # 泛型类型变量


class Document(ABC):
    """
    文档接口

    存储任意命名值，并以非类型化或指定类型的方式读取。

    设计原则：
    - 动态属性：不需要预先声明字段
    - 类型收窄：读取时显式指定期望类型，而不是进行未检查的转换
    """

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """
        存储属性值，覆盖同名的已有值

        Args:
            key: 属性键
            value: 属性值（任意类型）
        """
        pass

    @abstractmethod
    def get(self, key: str, expected_type: Optional[Type[T]] = None) -> Optional[T]:
        """
        读取属性值

        Args:
            key: 属性键
            expected_type: 期望类型；为None时返回原始值

        Returns:
            存储的值；键不存在时返回None

        Raises:
            PropertyTypeError: 值存在但不是期望类型时
        """
        pass
