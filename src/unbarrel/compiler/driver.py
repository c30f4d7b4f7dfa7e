"""
Rewrite Driver

Orchestrates a whole run over a source tree:
1. transform every file concurrently (reads only)
2. write the rewritten files
3. delete the barrels touched during resolution
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..analysis.module_system import BarrelRegistry, BarrelResolver, PathResolver
from ..frontend.parser import ImportParser
from ..shared.errors import Diagnostic, ErrorReporter
from ..utils.config import DEFAULT_GLOB_PATTERN, DEFAULT_MAX_WORKERS
from ..utils.io_utils import FileStore
from .file_transformer import FileReport, FileTransformer

logger = logging.getLogger(__name__)


@dataclass
class FileFailure:
    """A file whose task raised; siblings are unaffected."""
    path: Path
    error: Exception

    def __str__(self) -> str:
        return f"{self.path}: {type(self.error).__name__}: {self.error}"


@dataclass
class RewriteSummary:
    """End-of-run summary."""
    root: Path
    reports: List[FileReport] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)
    scheduled_barrels: List[Path] = field(default_factory=list)
    deleted_barrels: List[Path] = field(default_factory=list)
    dry_run: bool = False

    @property
    def failed_files(self) -> List[Path]:
        return [f.path for f in self.failures]

    @property
    def succeeded_files(self) -> List[Path]:
        failed = set(self.failed_files)
        return [r.path for r in self.reports if r.path not in failed]

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [d for r in self.reports for d in r.diagnostics]

    @property
    def statements_rewritten(self) -> int:
        return sum(r.rewritten for r in self.reports)

    @property
    def success(self) -> bool:
        return not self.failures

    def reporter(self) -> ErrorReporter:
        """ErrorReporter primed with the original sources of every file."""
        reporter = ErrorReporter({str(r.path): r.original for r in self.reports})
        reporter.extend(self.diagnostics)
        return reporter

    def format(self) -> str:
        total = len(self.succeeded_files) + len(self.failures)
        lines = [
            f"{'Would rewrite' if self.dry_run else 'Rewrote'} {len(self.succeeded_files)} of {total} files "
            f"({self.statements_rewritten} statements changed), {len(self.failures)} failed"
        ]
        lines.extend(f"  failed: {failure}" for failure in self.failures)
        if self.dry_run:
            lines.append(f"{len(self.scheduled_barrels)} barrel files would be deleted")
        else:
            lines.append(f"Deleted {len(self.deleted_barrels)} of {len(self.scheduled_barrels)} barrel files")
        reporter = self.reporter()
        lines.append(f"{reporter.error_count()} errors, {reporter.warning_count()} warnings")
        return "\n".join(lines)


class RewriteDriver:
    """
    Rewrites the imports of every file matching `pattern` under `root`.

    Components are created once per driver and shared by the worker
    threads; the barrel registry is the only state they write to.
    """

    def __init__(
        self,
        root: Union[Path, str],
        pattern: str = DEFAULT_GLOB_PATTERN,
        max_workers: int = DEFAULT_MAX_WORKERS,
        delete_barrels: bool = True,
        dry_run: bool = False,
        file_store: Optional[FileStore] = None,
    ):
        self.root = Path(root)
        self.pattern = pattern
        self.max_workers = max_workers
        self.delete_barrels = delete_barrels
        self.dry_run = dry_run
        self.file_store = file_store if file_store is not None else FileStore()
        self.registry = BarrelRegistry()
        self.path_resolver = PathResolver(self.file_store)
        self.barrel_resolver = BarrelResolver(self.path_resolver, registry=self.registry)
        self.transformer = FileTransformer(
            parser=ImportParser(),
            path_resolver=self.path_resolver,
            barrel_resolver=self.barrel_resolver,
            file_store=self.file_store,
        )

    def discover(self) -> List[Path]:
        """All files under the root matching the pattern, sorted."""
        return sorted(p for p in self.root.glob(self.pattern) if p.is_file())

    def run(self) -> RewriteSummary:
        files = self.discover()
        logger.info(f"Rewriting imports in {len(files)} files under {self.root}")
        summary = RewriteSummary(root=self.root, dry_run=self.dry_run)

        self._transform_all(files, summary)
        if not self.dry_run:
            self._write_all(summary)

        # The root barrel goes too, even when nothing imported it
        root_barrel = self.path_resolver.find_barrel(self.root, ".")
        if root_barrel is not None:
            self.registry.add(self.root / root_barrel)
        summary.scheduled_barrels = self.registry.snapshot()

        if self.delete_barrels and not self.dry_run:
            self._delete_barrels(summary)

        logger.info(summary.format().splitlines()[0])
        return summary

    def _transform_all(self, files: List[Path], summary: RewriteSummary) -> None:
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {executor.submit(self.transformer.transform, path): path for path in files}
            for future in as_completed(futures):
                path = futures[future]
                try:
                    summary.reports.append(future.result())
                except Exception as e:
                    logger.error(f"{path}: transformation failed: {e}")
                    summary.failures.append(FileFailure(path, e))
        summary.reports.sort(key=lambda r: r.path)
        summary.failures.sort(key=lambda f: f.path)

    def _write_all(self, summary: RewriteSummary) -> None:
        for report in summary.reports:
            if not report.has_imports:
                continue
            try:
                self.file_store.write(report.path, report.text)
            except OSError as e:
                logger.error(f"{report.path}: could not write file: {e}")
                summary.failures.append(FileFailure(report.path, e))
                continue
            logger.info(f"{report.path} Updated file")

    def _delete_barrels(self, summary: RewriteSummary) -> None:
        for barrel in summary.scheduled_barrels:
            logger.info(f"deleting barrel file {barrel}")
            try:
                self.file_store.delete(barrel)
            except OSError as e:
                logger.error(f"{barrel}: could not delete barrel file: {e}")
                summary.failures.append(FileFailure(barrel, e))
                continue
            summary.deleted_barrels.append(barrel)
