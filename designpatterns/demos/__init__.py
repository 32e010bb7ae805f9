"""
Demonstration entry points for both patterns.
"""

from . import abstract_document, abstract_factory

__all__ = ['abstract_document', 'abstract_factory']
