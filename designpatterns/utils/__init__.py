"""
Utility functions for the design pattern demos.

This module provides configuration loading and logging setup.
"""

from .config import (
    load_yaml, deep_update, parse_cli_overrides,
    load_config, build_argparser, validate_demo_config
)
from .logging_utils import setup_logging

__all__ = [
    'load_yaml', 'deep_update', 'parse_cli_overrides',
    'load_config', 'build_argparser', 'validate_demo_config',
    'setup_logging'
]
