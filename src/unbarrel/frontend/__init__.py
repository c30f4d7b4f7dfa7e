"""Statement parsing and formatting."""

from .parser import ImportParser, format_import, to_executable_path

__all__ = ['ImportParser', 'format_import', 'to_executable_path']
