"""
Abstract Document pattern.

A schema-less property store with typed reads, and a ``Car`` entity that
layers named accessors over it.
"""

from .abstract_document import AbstractDocument
from .car import Car
from .properties import Property

__all__ = ['AbstractDocument', 'Car', 'Property']
