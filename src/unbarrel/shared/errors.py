"""
Error Reporting

Failure kinds raised while resolving a single import statement, and the
diagnostics they are turned into once the file transformer has caught them.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, List, Dict

from .source_location import SourceLocation
from ..utils.config import COLOR_ENV_VAR


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return sys.stderr.isatty()

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_YELLOW = "\033[33m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Diagnostic dataclass
# ---------------------------------------------------------------------------

ERROR = "error"
WARNING = "warning"


@dataclass
class Diagnostic:
    """A problem found with one import statement."""
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    severity: str = WARNING
    statement: Optional[str] = None
    note: Optional[str] = None


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(
    diagnostic: Diagnostic,
    source_files: Dict[str, str],
    color: bool = False,
) -> str:
    """
    Render a single diagnostic in rustc style.

    Example output (plain, no color)::

        warning[W0002]: couldn't find 'Missing' in the barrel file "b/index.ts"
         --> app.ts:3:1
          |
        3 | import { Missing } from './b';
          | ^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^
    """
    out: List[str] = []
    severity_color = _RED if diagnostic.severity == ERROR else _YELLOW

    code_str = f"[{diagnostic.code}]" if diagnostic.code else ""
    out.append(
        _style(f"{diagnostic.severity}{code_str}", _BOLD, severity_color, color=color)
        + _style(f": {diagnostic.message}", _BOLD, color=color)
    )

    loc = diagnostic.location
    if loc is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        _append_note(out, diagnostic, 1, color)
        return "\n".join(out)

    source = source_files.get(loc.file)
    if source is not None:
        src_lines = source.split("\n")
        code_line = src_lines[loc.line - 1] if 0 < loc.line <= len(src_lines) else ""
    else:
        # Fall back to the statement text itself
        code_line = (diagnostic.statement or "").split("\n")[0]
        if code_line:
            code_line = " " * (loc.column - 1) + code_line

    gw = len(str(loc.line))
    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(loc))
    if not code_line:
        _append_note(out, diagnostic, gw, color)
        return "\n".join(out)

    col_start = max(loc.column, 1) - 1
    span_len = max(1, len(code_line.rstrip()) - col_start)
    if loc.end > loc.start:
        span_len = max(1, min(span_len, loc.end - loc.start))

    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)
    carets = " " * col_start + "^" * span_len
    out.append(
        _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
        + _style(carets, _BOLD, severity_color, color=color)
    )
    _append_note(out, diagnostic, gw, color)
    return "\n".join(out)


def _append_note(out: List[str], diagnostic: Diagnostic, gw: int, color: bool) -> None:
    if not diagnostic.note:
        return
    pad = " " * (gw + 1)
    out.append(_style(pad + "|", _BOLD, _BLUE, color=color))
    out.append(
        _style(f"{pad}= ", _BOLD, _CYAN, color=color)
        + _style("note: ", _BOLD, color=color)
        + diagnostic.note
    )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """Collects diagnostics across files and renders them."""

    def __init__(self, source_files: Optional[Dict[str, str]] = None):
        self.source_files = source_files if source_files is not None else {}
        self.diagnostics: List[Diagnostic] = []

    def extend(self, diagnostics: List[Diagnostic]) -> None:
        self.diagnostics.extend(diagnostics)

    def format_diagnostic(self, diagnostic: Diagnostic, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(diagnostic, self.source_files, color=use_color)

    def format_all(self, color: Optional[bool] = None) -> str:
        return "\n\n".join(self.format_diagnostic(d, color=color) for d in self.diagnostics)

    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == ERROR)

    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == WARNING)

    def has_errors(self) -> bool:
        return self.error_count() > 0

    def print_all(self) -> None:
        if self.diagnostics:
            print(self.format_all(), file=sys.stderr)


# ============================================================================
# Exception Classes
# ============================================================================

class UnbarrelError(Exception):
    """
    Base exception for a statement that could not be rewritten.

    None of these are fatal: the statement is left as written and the
    failure is reported as a diagnostic.
    """
    code = "E0000"
    severity = ERROR
    log_level = logging.ERROR

    def __init__(self, message: str, statement: Optional[str] = None, note: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.statement = statement
        self.note = note

    def to_diagnostic(self, location: Optional[SourceLocation] = None) -> Diagnostic:
        return Diagnostic(
            message=self.message,
            location=location,
            code=self.code,
            severity=self.severity,
            statement=self.statement,
            note=self.note,
        )


class MalformedStatementError(UnbarrelError):
    """The statement does not have the shape `import ... from '...';`."""
    code = "E0001"


class CyclicBarrelError(UnbarrelError):
    """A barrel re-exports (directly or through others) back into itself."""
    code = "E0002"


class UnresolvedDestinationError(UnbarrelError):
    """Neither a concrete file nor a barrel exists at the destination."""
    code = "W0001"
    severity = WARNING
    log_level = logging.WARNING


class SymbolNotFoundError(UnbarrelError):
    """The barrel chain was exhausted without finding every requested symbol."""
    code = "W0002"
    severity = WARNING
    log_level = logging.WARNING


MISSING_EXTENSION_CODE = "W0003"
