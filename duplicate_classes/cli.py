"""Command line entry point: find-duplicate-classes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .analysis import analyze
from .config import AnalysisConfig
from .errors import ConfigurationError
from .log import configure_cli_logging
from .report import render, to_dict
from .sources import combine, discover, read_manifest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='find-duplicate-classes',
        description='Report JAR files that contain the same compiled classes.',
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('paths', nargs='*', help='Directories to search for .jar files, or .jar files (default: .)')
    parser.add_argument('--manifest', '-m', metavar='FILE',
                        help='Read "identifier path [scope [trail...]]" lines instead of searching')
    parser.add_argument('--include-scope', metavar='SCOPES', default=None,
                        help='Scopes to analyze (default: compile,runtime,system,provided)')
    parser.add_argument('--exclude-scope', metavar='SCOPES', default=None, help='Scopes to leave out')
    parser.add_argument('--limit', type=int, default=None, metavar='N',
                        help='Class names to print per group (default: 10)')
    parser.add_argument('--format', '-f', choices=['text', 'json'], default='text', help='Output format (default: text)')
    parser.add_argument('--skip-module-info', action='store_true',
                        help='Do not count module-info.class entries as classes')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log how every archive pair overlaps')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only log warnings and errors')
    return parser


class _Percent:
    """Overwrites a running percentage in place, like 'Reading JAR files... 42%'."""

    def __init__(self, stream):
        self.stream = stream
        self.perc = ''

    def __call__(self, count, total):
        print('\b' * len(self.perc), end='', file=self.stream)
        self.perc = str(round(100 * count / total)) + '% '
        print(self.perc, end='', file=self.stream, flush=True)


def _archives(args):
    if args.manifest:
        archives = read_manifest(args.manifest)
        if args.paths:
            archives = combine(archives, discover(args.paths))
        return archives
    return discover(args.paths or ['.'])


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 1:
        parser.error('--limit must be at least 1')
    configure_cli_logging(quiet=args.quiet, verbose=args.verbose)

    config = AnalysisConfig.from_env().with_overrides(
        include_scope=args.include_scope,
        exclude_scope=args.exclude_scope,
        class_list_limit=args.limit,
        skip_module_info=True if args.skip_module_info else None,
    )

    show_progress = args.format == 'text' and not args.quiet and sys.stderr.isatty()
    try:
        archives = _archives(args)
        progress = None
        if show_progress:
            print('Reading JAR files... ', end='', file=sys.stderr, flush=True)
            progress = _Percent(sys.stderr)
        analysis = analyze(archives, config, progress)
    except ConfigurationError as exception:
        if show_progress:
            print(file=sys.stderr)
        logger.error('find-duplicate-classes: %s', exception)
        return 1

    if show_progress:
        print(file=sys.stderr)
        print('Scanning for duplicate classes...', file=sys.stderr)

    if args.format == 'json':
        print(json.dumps(to_dict(analysis.report, analysis.archives), indent=2))
    else:
        for line in render(analysis.report, limit=config.class_list_limit, trails=analysis.trails()):
            print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
