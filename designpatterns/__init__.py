"""
Design Patterns Demo

Two classic object-oriented pattern demonstrations: an Abstract Document
(a schema-less property store with typed reads) and an Abstract Factory
(platform-specific GUI widget families).
"""

__version__ = "1.0.0"

# Core components that users might need to import directly
from .abstractdocument import Car
from .abstractfactory import Application, create_gui_factory

__all__ = ['Car', 'Application', 'create_gui_factory']
