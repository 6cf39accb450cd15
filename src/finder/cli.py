"""Command-line entry point for finder."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from finder.config import CliOverrides, FinderConfig, load_effective_config
from finder.errors import ConfigError, InvalidPatternError
from finder.logging import JsonlEventLogger, sanitize_options
from finder.matching import MATCH_ALL_PATTERN
from finder.output import ConsoleReporter
from finder.search import SearchSpec, WalkNotice, Walker

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

_EXAMPLES = """\
examples:
  finder . "*.txt"          find all .txt files below the current directory
  finder /usr config -c     files named 'config' or with a line reading 'config'
  finder -f readme          files with names similar to 'readme'
  finder / "*.log" -c -f    fuzzy search for .log names and lines below /
  finder . -- "-old*.txt"   patterns starting with "-" go after "--"

Arguments may appear in any order. A token naming an existing directory is the
start directory; the first other token is the pattern. Tokens after "--" are
never treated as options.
"""


@dataclass(slots=True, frozen=True)
class SearchTargets:
    """Start directory and pattern classified from positional tokens."""

    directory: Path
    pattern: str


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for a search run."""
    parser = argparse.ArgumentParser(
        prog="finder",
        description="Recursively search for files whose names or contents match a pattern.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="directory|pattern",
        help="start directory (default: current directory) and pattern (default: '*')",
    )
    parser.add_argument(
        "-c",
        "--content",
        action="store_true",
        help="also match the lines of text files against the pattern",
    )
    parser.add_argument(
        "-f",
        "--fuzzy",
        action="store_true",
        help="match by Levenshtein distance instead of exact pattern (case-insensitive)",
    )
    parser.add_argument(
        "-r",
        "--regex",
        action="store_true",
        help="treat the pattern as a regular expression instead of a wildcard",
    )
    parser.add_argument(
        "-d",
        "--dirs",
        action="store_true",
        help="also report directories whose names match",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=int,
        default=None,
        help="maximum edit distance accepted by --fuzzy (default: 4, at most 64)",
    )
    parser.add_argument("--json", action="store_true", help="print one JSON object per line")
    parser.add_argument("--config", type=Path, default=None, help="TOML configuration file")
    parser.add_argument(
        "--log-file", type=Path, default=None, help="append structured JSONL events here"
    )
    return parser


def classify_targets(tokens: list[str], default_directory: Path) -> SearchTargets:
    """Split positional tokens into start directory and pattern.

    The last token naming an existing directory wins; the first remaining
    token is the pattern and later ones are ignored.
    """
    directory = default_directory
    pattern: str | None = None
    for token in tokens:
        if token and Path(token).is_dir():
            directory = Path(token)
            continue
        if pattern is None:
            pattern = token
    return SearchTargets(
        directory=directory,
        pattern=pattern if pattern is not None else MATCH_ALL_PATTERN,
    )


def build_search_spec(
    args: argparse.Namespace, targets: SearchTargets, config: FinderConfig
) -> SearchSpec:
    """Build the immutable search spec from parsed options."""
    return SearchSpec(
        start_directory=targets.directory,
        pattern=targets.pattern,
        use_fuzzy=args.fuzzy,
        fuzzy_threshold=config.search.fuzzy_threshold,
        search_content=args.content,
        pattern_mode="regex" if args.regex else "wildcard",
        include_directories=args.dirs,
    )


def _error(message: str) -> int:
    print(f"finder: error: {message}", file=sys.stderr)
    return EXIT_USAGE


def split_literal_targets(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate the tokens after a bare ``--``; they are never options."""
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the finder command."""
    parser = build_arg_parser()
    option_tokens, literal_tokens = split_literal_targets(
        list(sys.argv[1:] if argv is None else argv)
    )
    args = parser.parse_intermixed_args(option_tokens)

    try:
        config = load_effective_config(
            config_path=args.config,
            overrides=CliOverrides(fuzzy_threshold=args.threshold),
        )
    except ConfigError as error:
        return _error(str(error))

    try:
        current = Path.cwd()
    except FileNotFoundError:
        current = Path(".")
    targets = classify_targets([*args.targets, *literal_tokens], default_directory=current)
    if not targets.directory.is_dir():
        return _error(f"start directory does not exist: {targets.directory}")

    spec = build_search_spec(args, targets, config)
    reporter = ConsoleReporter(sys.stdout, json_lines=args.json)
    event_logger: JsonlEventLogger | None = None

    def log_event(event: str, path: Path | None, **metadata: object) -> None:
        nonlocal event_logger
        if event_logger is None:
            return
        try:
            event_logger.emit(event, path, **metadata)
        except OSError as error:
            print(f"finder: warning: event log disabled: {error}", file=sys.stderr)
            event_logger = None

    def on_notice(notice: WalkNotice) -> None:
        reporter.notice(notice)
        log_event("notice", notice.path, kind=notice.kind, detail=notice.detail)

    try:
        walker = Walker(
            spec,
            exclusions=config.exclusions,
            text_extensions=config.content.text_extensions,
            on_notice=on_notice,
        )
    except InvalidPatternError as error:
        return _error(str(error))

    if args.log_file is not None:
        try:
            event_logger = JsonlEventLogger(args.log_file)
            event_logger.emit(
                "search_started",
                spec.start_directory,
                config=config.to_public_dict(),
                options=sanitize_options(
                    {
                        "pattern": spec.pattern,
                        "use_fuzzy": spec.use_fuzzy,
                        "fuzzy_threshold": spec.fuzzy_threshold,
                        "search_content": spec.search_content,
                        "pattern_mode": spec.pattern_mode,
                        "include_directories": spec.include_directories,
                    }
                ),
            )
        except OSError as error:
            reason = error.strerror or str(error)
            return _error(f"cannot write event log {args.log_file}: {reason}")

    try:
        for record in walker.walk():
            reporter.record(record)
    except KeyboardInterrupt:
        log_event("search_interrupted", spec.start_directory)
        return EXIT_INTERRUPTED

    log_event(
        "search_finished",
        spec.start_directory,
        matches=dict(sorted(reporter.match_counts.items())),
        notices=dict(sorted(reporter.notice_counts.items())),
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
