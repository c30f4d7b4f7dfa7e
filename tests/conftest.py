"""
Pytest configuration and shared fixtures for all unbarrel tests.

Stateless components (parser, symbol matcher) are shared across the
session; anything that touches a file store or registry is per test.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from unbarrel.analysis.module_system import (
    BarrelRegistry,
    BarrelResolver,
    PathResolver,
    SymbolMatcher,
)
from unbarrel.compiler.file_transformer import FileTransformer
from unbarrel.frontend.parser import ImportParser
from unbarrel.utils.io_utils import FileStore


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def parser():
    """The Lark grammar is built once; parsing keeps no state."""
    return ImportParser()


@pytest.fixture(scope="session")
def symbol_matcher():
    return SymbolMatcher()


# =============================================================================
# Function-scoped fixtures (default - one per test)
# =============================================================================

@pytest.fixture
def file_store():
    return FileStore()


@pytest.fixture
def path_resolver(file_store):
    return PathResolver(file_store)


@pytest.fixture
def registry():
    return BarrelRegistry()


@pytest.fixture
def barrel_resolver(path_resolver, symbol_matcher, registry):
    return BarrelResolver(path_resolver, symbol_matcher, registry)


@pytest.fixture
def transformer(parser, path_resolver, barrel_resolver, file_store):
    return FileTransformer(
        parser=parser,
        path_resolver=path_resolver,
        barrel_resolver=barrel_resolver,
        file_store=file_store,
    )


@pytest.fixture
def src(tmp_path):
    """Empty source root inside the test's temporary directory."""
    root = tmp_path / "src"
    root.mkdir()
    return root
