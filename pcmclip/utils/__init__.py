"""
pcmclip Utilities Module

Utility functions and helpers:
- logger: Logging configuration
"""
from .logger import logger

__all__ = ['logger']
