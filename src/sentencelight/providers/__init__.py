"""
SentenceLight Providers Package

This package contains host and logging providers for SentenceLight. All
providers follow SentenceLight's dependency injection pattern.
"""

from .loggers import StdlibLogger
from .memory_host import MemoryEditor

__all__ = ['MemoryEditor', 'StdlibLogger']
