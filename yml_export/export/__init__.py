"""
Feed export modules.

Modules:
    xml_writer - YML document rendering and file output
"""

from .xml_writer import YMLWriter

__all__ = ['YMLWriter']
