"""
Output modules for roundtrip
"""

from .console import ConsoleOutput, make_console

__all__ = ['ConsoleOutput', 'make_console']
