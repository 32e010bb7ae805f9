"""
Application that consumes a GUI factory.
"""

from ..core.interfaces.gui import GUIFactory


class Application:
    """
    Holds one button and one checkbox obtained from a single factory.

    Example:
        app = Application(WinFactory())
        app.paint()
    """

    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def paint(self) -> None:
        self.button.paint()
        self.checkbox.paint()
