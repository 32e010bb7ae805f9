"""
Well-known property keys.
"""

from enum import Enum


class Property(Enum):
    """Keys read and written by the named accessors of concrete documents"""
    MODEL = "model"
    PRICE = "price"
    COLOR = "color"
