"""
File Transformer

Rewrites every relative import statement of one source file.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..analysis.module_system import BarrelResolver, PathResolver
from ..frontend.parser import ImportParser, format_import
from ..shared.errors import Diagnostic, UnbarrelError, SymbolNotFoundError, MISSING_EXTENSION_CODE, WARNING
from ..shared.nodes import ImportStatement
from ..shared.source_location import SourceLocation
from ..utils.config import AUTHORING_EXTENSION, EXECUTABLE_EXTENSION, RELATIVE_PREFIX
from ..utils.io_utils import FileStore

logger = logging.getLogger(__name__)

# import ... from '...';  (a quote or `;` in the binding means a different
# statement, so side-effect imports never get swallowed into the next one)
IMPORT_STATEMENT_PATTERN = re.compile(
    r"\bimport\s+[^;'\"]+?\bfrom\s*'(?P<destination>[^'\n]*)'(?:\s*;)?"
)


@dataclass
class FileReport:
    """Outcome of transforming one file."""
    path: Path
    original: str
    text: str
    has_imports: bool = False
    rewritten: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.text != self.original


class FileTransformer:
    """
    Applies parse -> resolve -> format to each relative import of a file.

    A statement that fails is left exactly as written and reported as a
    diagnostic; processing continues with the next statement. Replacements
    are applied to a running buffer, each one to the first occurrence of the
    original statement text.
    """

    def __init__(
        self,
        parser: Optional[ImportParser] = None,
        path_resolver: Optional[PathResolver] = None,
        barrel_resolver: Optional[BarrelResolver] = None,
        file_store: Optional[FileStore] = None,
    ):
        self.file_store = file_store if file_store is not None else FileStore()
        self.parser = parser if parser is not None else ImportParser()
        self.path_resolver = path_resolver if path_resolver is not None else PathResolver(self.file_store)
        self.barrel_resolver = (
            barrel_resolver if barrel_resolver is not None else BarrelResolver(self.path_resolver)
        )

    def transform(self, file_path: Union[Path, str]) -> FileReport:
        """Compute the rewritten text of `file_path` without writing it."""
        path = Path(file_path)
        source = self.file_store.read(path)
        report = FileReport(path=path, original=source, text=source)

        matches = list(IMPORT_STATEMENT_PATTERN.finditer(source))
        if not matches:
            logger.debug(f"{path} No import statements found")
            return report
        report.has_imports = True

        data = source
        for match in matches:
            if not match.group("destination").startswith(RELATIVE_PREFIX):
                continue
            statement_text = match.group(0)
            location = SourceLocation.from_offset(str(path), source, match.start(), match.end())
            try:
                replacement = self.fix_statement(path.parent, str(path), statement_text, location, report)
            except UnbarrelError as e:
                logger.log(e.log_level, f"{path}: {e.message} -> {statement_text}")
                report.diagnostics.append(e.to_diagnostic(location))
                continue
            if replacement != statement_text:
                data = data.replace(statement_text, replacement, 1)
                report.rewritten += 1

        report.text = data
        return report

    def rewrite(self, file_path: Union[Path, str]) -> FileReport:
        """Transform `file_path` and persist the result."""
        report = self.transform(file_path)
        if report.has_imports:
            self.file_store.write(report.path, report.text)
            logger.info(f"{report.path} Updated file")
        return report

    def fix_statement(
        self,
        base_dir: Path,
        file_path: str,
        statement_text: str,
        location: Optional[SourceLocation] = None,
        report: Optional[FileReport] = None,
    ) -> str:
        """
        Return the replacement text for one relative import statement.

        Raises:
            UnbarrelError: The statement must be left unchanged
        """
        statement = self.parser.parse(statement_text, location)

        direct = self.path_resolver.resolve(base_dir, statement.destination)
        if direct is not None:
            self._check_extension(file_path, statement, direct, report)
            return format_import(statement, destination=direct)

        resolved = self.barrel_resolver.resolve_imports(base_dir, file_path, statement)
        if not resolved:
            raise SymbolNotFoundError(
                f"Couldn't find the import in the barrel file for {statement.destination}",
                statement=statement.text,
            )
        for resolved_import in resolved:
            self._check_extension(file_path, statement, resolved_import.destination, report)
        return "\n".join(self.barrel_resolver.render(statement, r) for r in resolved)

    def _check_extension(
        self,
        file_path: str,
        statement: ImportStatement,
        destination: str,
        report: Optional[FileReport],
    ) -> None:
        if destination.endswith(EXECUTABLE_EXTENSION) or destination.endswith(AUTHORING_EXTENSION):
            return
        message = f"The file doesn't have an extension {destination}"
        logger.warning(f"{file_path}: {message}")
        if report is not None:
            report.diagnostics.append(Diagnostic(
                message=message,
                location=statement.location,
                code=MISSING_EXTENSION_CODE,
                severity=WARNING,
                statement=statement.text,
            ))
