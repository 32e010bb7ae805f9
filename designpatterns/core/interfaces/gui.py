"""
GUI工厂接口定义

定义了抽象工厂模式的标准接口：工厂负责创建同一视觉风格的
一组控件（按钮和复选框），调用方无需知道具体是哪一个风格族。
"""

from abc import ABC, abstractmethod


class Button(ABC):
    """可以被绘制的按钮"""

    @abstractmethod
    def paint(self) -> None:
        """绘制按钮"""
        pass


class Checkbox(ABC):
    """可以被绘制的复选框"""

    @abstractmethod
    def paint(self) -> None:
        """绘制复选框"""
        pass


class GUIFactory(ABC):
    """
    GUI工厂接口

    不同的实现创建不同风格（例如Windows或Mac）的按钮和复选框。

    设计原则：
    - 抽象工厂模式：定义创建相关对象族的接口
    - 一致性：同一个工厂创建的控件属于同一风格族
    """

    @abstractmethod
    def create_button(self) -> Button:
        """
        创建按钮

        Returns:
            属于本风格族的按钮实例
        """
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        """
        创建复选框

        Returns:
            属于本风格族的复选框实例
        """
        pass
