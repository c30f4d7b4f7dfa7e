"""
Barrel Resolver

Expands barrel re-exports to find the concrete file(s) declaring the
symbols a statement imports.

This class handles:
- Locating `<dir>/index.<ext>` for a destination that is not a file
- Scheduling every barrel it reads for deletion
- Walking re-export targets in declaration order, descending into nested
  barrels with the barrel's directory as the new base
- Detecting barrels that re-export back into themselves
"""

import logging
import posixpath
from pathlib import Path
from typing import List, Optional, Union

from .path_resolver import PathResolver, join_relative, as_import_path
from .symbol_matcher import SymbolMatcher
from .barrel_registry import BarrelRegistry
from .module_info import BarrelModule, ResolvedImport
from ...frontend.parser import format_import
from ...shared.nodes import ImportStatement, NamedBinding
from ...shared.errors import (
    CyclicBarrelError,
    SymbolNotFoundError,
    UnresolvedDestinationError,
)

logger = logging.getLogger(__name__)


class BarrelResolver:
    """
    Resolves a named import of a barrel into imports of concrete files.

    Resolution policy:
    - re-export targets are visited in file order
    - the first file declaring a symbol wins; later declarations of the
      same symbol are ignored
    - every requested symbol must be found, otherwise the statement is
      left alone (SymbolNotFoundError); an empty `{}` list finds nothing
      and fails the same way
    - a barrel is registered before it is read, so it is scheduled for
      deletion even when resolution fails
    - exception: a default or namespace import of a barrel is rejected
      before the barrel is read, and does not register it. Nothing in such
      an import can be moved to a concrete file, so the barrel must stay.

    Safe to share between threads: all per-statement state is passed
    through the recursion.
    """

    def __init__(
        self,
        path_resolver: PathResolver,
        symbol_matcher: Optional[SymbolMatcher] = None,
        registry: Optional[BarrelRegistry] = None,
    ):
        self.path_resolver = path_resolver
        self.file_store = path_resolver.file_store
        self.symbol_matcher = symbol_matcher if symbol_matcher is not None else SymbolMatcher()
        self.registry = registry if registry is not None else BarrelRegistry()

    def resolve(self, base_dir: Union[Path, str], file_path: str, statement: ImportStatement) -> List[str]:
        """
        Rewrite `statement` into one import per concrete defining file.

        Args:
            base_dir: Directory of the importing file
            file_path: Importing file (for log messages)
            statement: Parsed statement whose destination is a directory

        Returns:
            Replacement statements, in re-export order

        Raises:
            UnresolvedDestinationError: No barrel at the destination, or the
                binding is a default/namespace form that cannot be narrowed
            SymbolNotFoundError: Some symbol is not declared anywhere in the
                barrel chain
            CyclicBarrelError: The barrel chain loops
        """
        return [self.render(statement, r) for r in self.resolve_imports(base_dir, file_path, statement)]

    def resolve_imports(
        self,
        base_dir: Union[Path, str],
        file_path: str,
        statement: ImportStatement,
    ) -> List[ResolvedImport]:
        base = Path(base_dir)
        barrel_rel = self.path_resolver.find_barrel(base, statement.destination)
        if barrel_rel is None:
            raise UnresolvedDestinationError(
                f"Neither the file nor the barrel file exists -> {statement.destination}",
                statement=statement.text,
            )
        if not isinstance(statement.binding, NamedBinding):
            raise UnresolvedDestinationError(
                f"Cannot narrow '{statement.binding}' through the barrel file {barrel_rel}",
                statement=statement.text,
                note="only `{ ... }` imports can be split across the files a barrel re-exports",
            )

        requested = statement.binding.names
        resolved: List[ResolvedImport] = []
        remaining = self._expand(base, file_path, statement.destination, requested, resolved, [])

        if remaining or not resolved:
            raise SymbolNotFoundError(
                f"Couldn't find the import '{', '.join(remaining)}' in the barrel file "
                f"\"{posixpath.normpath(barrel_rel)}\"",
                statement=statement.text,
                note=None if requested else "the import list is empty",
            )
        logger.debug(f"{file_path}: {statement.destination} -> {resolved}")
        return resolved

    def render(self, statement: ImportStatement, resolved: ResolvedImport) -> str:
        """`import [type ]{ <found symbols> } from './<file>.js';`"""
        return format_import(
            statement,
            destination=resolved.destination,
            binding=statement.binding.select(resolved.names),
        )

    def _expand(
        self,
        base: Path,
        file_path: str,
        directory: str,
        remaining: List[str],
        resolved: List[ResolvedImport],
        stack: List[Path],
    ) -> List[str]:
        """
        Search one barrel for `remaining`, appending finds to `resolved`.

        Returns the symbols still unresolved after this barrel (and the
        barrels nested below it) has been searched.
        """
        barrel_rel = self.path_resolver.find_barrel(base, directory)
        barrel_path = (base / barrel_rel).resolve()

        if barrel_path in stack:
            chain = " -> ".join(str(p) for p in stack + [barrel_path])
            raise CyclicBarrelError(f"Circular barrel re-export detected: {chain}")

        self.registry.add(barrel_path)
        barrel = BarrelModule.from_source(directory, barrel_path, self.file_store.read(barrel_path))
        logger.debug(f"{file_path}: searching {barrel} for {remaining}")

        stack.append(barrel_path)
        try:
            for target in barrel.reexports:
                if not remaining:
                    break
                module_path = join_relative(directory, target)

                concrete = self.path_resolver.resolve(base, module_path)
                if concrete is not None:
                    found = self.symbol_matcher.find_declared(self.file_store.read(base / concrete), remaining)
                    if found:
                        resolved.append(ResolvedImport(as_import_path(posixpath.normpath(concrete)), found))
                        remaining = [s for s in remaining if s not in found]
                    continue

                if self.path_resolver.find_barrel(base, module_path) is not None:
                    remaining = self._expand(base, file_path, module_path, remaining, resolved, stack)
                    continue

                logger.warning(f"{file_path}: The file doesn't exist in {module_path}")
        finally:
            stack.pop()

        return remaining
