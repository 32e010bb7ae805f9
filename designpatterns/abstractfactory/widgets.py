"""
Concrete widget families.

Each widget writes one line describing which family rendered it. The
output stream defaults to ``sys.stdout`` and is resolved at paint time.
"""

import logging
import sys
from typing import Optional, TextIO

from ..core.interfaces.gui import Button, Checkbox


class StyledWidget:
    """Shared output handling for the concrete widgets"""

    message = ""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _render(self) -> None:
        print(self.message, file=self.stream)
        self._logger.debug(f"Painted {self.__class__.__name__}")


class WinButton(StyledWidget, Button):
    """A button painted in a Windows style."""

    message = "Render a button in a Windows Style"

    def paint(self) -> None:
        self._render()


class WinCheckbox(StyledWidget, Checkbox):
    """A checkbox painted in a Windows style."""

    message = "Render a checkbox in a Windows Style"

    def paint(self) -> None:
        self._render()


class MacButton(StyledWidget, Button):
    """A button painted in a Mac style."""

    message = "Render a button in a Mac Style"

    def paint(self) -> None:
        self._render()


class MacCheckbox(StyledWidget, Checkbox):
    """
    A checkbox painted in a Mac style.

    Example:
        MacCheckbox().paint()
        # Render a checkbox in a Mac Style
    """

    message = "Render a checkbox in a Mac Style"

    def paint(self) -> None:
        self._render()
