"""
unbarrel: rewrite relative imports that go through barrel (index) modules
into direct imports of the defining files, with explicit extensions.
"""

from .compiler.driver import RewriteDriver, RewriteSummary
from .compiler.file_transformer import FileTransformer

__version__ = "0.1.0"

__all__ = ["RewriteDriver", "RewriteSummary", "FileTransformer", "__version__"]
