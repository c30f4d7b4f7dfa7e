"""Shared data types and error reporting."""

from .source_location import SourceLocation
from .nodes import ImportSpecifier, NamedBinding, RawBinding, Binding, ImportStatement
from .errors import (
    Diagnostic,
    ErrorReporter,
    UnbarrelError,
    MalformedStatementError,
    CyclicBarrelError,
    UnresolvedDestinationError,
    SymbolNotFoundError,
)

__all__ = [
    'SourceLocation',
    'ImportSpecifier',
    'NamedBinding',
    'RawBinding',
    'Binding',
    'ImportStatement',
    'Diagnostic',
    'ErrorReporter',
    'UnbarrelError',
    'MalformedStatementError',
    'CyclicBarrelError',
    'UnresolvedDestinationError',
    'SymbolNotFoundError',
]
