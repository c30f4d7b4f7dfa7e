"""File transformation and run orchestration."""

from .file_transformer import FileTransformer, FileReport, IMPORT_STATEMENT_PATTERN
from .driver import RewriteDriver, RewriteSummary, FileFailure

__all__ = [
    'FileTransformer',
    'FileReport',
    'IMPORT_STATEMENT_PATTERN',
    'RewriteDriver',
    'RewriteSummary',
    'FileFailure',
]
