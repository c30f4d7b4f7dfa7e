"""CLI entry point: run `unbarrel [root]` or `python -m unbarrel [root]`."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .utils.config import DEFAULT_WORKING_DIR, DEFAULT_GLOB_PATTERN, DEFAULT_MAX_WORKERS


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .compiler.driver import RewriteDriver

    parser = argparse.ArgumentParser(
        prog="unbarrel",
        description="Replace barrel imports with direct imports and add explicit .js extensions.",
    )
    parser.add_argument(
        "root", nargs="?", type=Path, default=Path(DEFAULT_WORKING_DIR),
        help=f"Source tree to rewrite (default: {DEFAULT_WORKING_DIR})",
    )
    parser.add_argument("--pattern", default=DEFAULT_GLOB_PATTERN,
                        help=f"Glob of files to rewrite, relative to root (default: {DEFAULT_GLOB_PATTERN})")
    parser.add_argument("--workers", type=int, default=DEFAULT_MAX_WORKERS,
                        help=f"Files transformed in parallel (default: {DEFAULT_MAX_WORKERS})")
    parser.add_argument("--keep-barrels", action="store_true", help="Do not delete touched barrel files")
    parser.add_argument("--dry-run", action="store_true", help="Report what would change without writing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resolution details")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    root = args.root.resolve()
    if not root.exists():
        sys.stderr.write(f"unbarrel: error: directory not found: {root}\n")
        return 1
    if not root.is_dir():
        sys.stderr.write(f"unbarrel: error: not a directory: {root}\n")
        return 1
    if args.workers < 1:
        sys.stderr.write("unbarrel: error: --workers must be at least 1\n")
        return 1

    driver = RewriteDriver(
        root,
        pattern=args.pattern,
        max_workers=args.workers,
        delete_barrels=not args.keep_barrels,
        dry_run=args.dry_run,
    )
    summary = driver.run()

    summary.reporter().print_all()
    sys.stderr.write(summary.format() + "\n")
    return 0 if summary.success else 1


if __name__ == "__main__":
    sys.exit(main())
