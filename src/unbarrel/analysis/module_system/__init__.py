"""Module system: extension resolution, symbol matching, barrel expansion."""

from .path_resolver import PathResolver, join_relative, as_import_path
from .symbol_matcher import SymbolMatcher
from .module_info import BarrelModule, ResolvedImport
from .barrel_registry import BarrelRegistry
from .barrel_resolver import BarrelResolver

__all__ = [
    'PathResolver',
    'join_relative',
    'as_import_path',
    'SymbolMatcher',
    'BarrelModule',
    'ResolvedImport',
    'BarrelRegistry',
    'BarrelResolver',
]
