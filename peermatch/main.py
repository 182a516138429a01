"""Command-line entry point: rank supporters for one client."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from peermatch.config.environment import EnvironmentConfig
from peermatch.config.exceptions import ConfigurationError
from peermatch.config.loader import load_config
from peermatch.config.models import AppConfig
from peermatch.directory import (
    DirectoryError,
    SupporterDirectory,
    close_database,
    get_session,
    init_database,
    load_candidates_file,
    load_preferences_file,
)
from peermatch.domain.models import SupporterCandidate
from peermatch.logging import get_logger
from peermatch.logging.config import configure_logging
from peermatch.logging.context import log_context
from peermatch.matching import SupporterMatcher, build_match_payload
from peermatch.reporting import ReportRenderError, ReportRenderer

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI > environment > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def resolve_directory_source(
    args: argparse.Namespace, app_config: AppConfig, env_config: EnvironmentConfig
) -> Tuple[str, str]:
    """
    Decide where supporters are read from.

    CLI flags win over environment variables, which win over the config
    file. At the same level a database URL wins over a supporters file.

    Returns:
        ("database", url) or ("file", path)

    Raises:
        ConfigurationError: If no source is configured anywhere
    """
    levels = (
        (args.database_url, args.supporters),
        (env_config.database_url, env_config.supporters_file),
        (app_config.directory.database_url, app_config.directory.supporters_file),
    )
    for database_url, supporters_file in levels:
        if database_url:
            return "database", database_url
        if supporters_file:
            return "file", str(supporters_file)

    raise ConfigurationError(
        "No supporter directory configured",
        suggestions=[
            "Pass --supporters FILE or --database-url URL",
            "Set SUPPORTERS_FILE or DATABASE_URL in your environment",
            "Set directory.supporters_file or directory.database_url in config.yaml",
        ],
    )


def load_candidates(
    source: str, location: str, onboarded_only: bool
) -> List[SupporterCandidate]:
    """Read supporter candidates from a file or the directory database."""
    if source == "file":
        return load_candidates_file(Path(location))

    init_database(location)
    try:
        with get_session() as session:
            return SupporterDirectory(session).list_candidates(onboarded_only=onboarded_only)
    finally:
        close_database()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peermatch",
        description="Rank peer supporters for a client by compatibility",
    )
    parser.add_argument(
        "--preferences",
        type=Path,
        required=True,
        help="JSON or YAML file with the client's preferences",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--supporters",
        type=Path,
        default=None,
        help="JSON or YAML file with supporter rows",
    )
    source.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL of the supporter directory database",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    limit = parser.add_mutually_exclusive_group()
    limit.add_argument(
        "--top",
        type=_positive_int,
        default=None,
        help="Only show the N best matches",
    )
    limit.add_argument(
        "--best",
        action="store_true",
        help="Only show the single best match",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--include-unonboarded",
        action="store_true",
        help="Also consider supporters who have not finished onboarding (database only)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run one matching request from the command line.

    Returns:
        Exit code (0 for success, 1 for configuration, input or directory errors)
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        with log_context(request_id=uuid.uuid4().hex[:12]):
            source, location = resolve_directory_source(args, app_config, env_config)
            onboarded_only = app_config.matching.require_onboarding and not args.include_unonboarded

            logger.info(
                "Matching request started",
                extra={
                    "event": "matching.request.started",
                    "preferences_path": str(args.preferences),
                    "directory_source": source,
                },
            )

            preferences = load_preferences_file(args.preferences)
            candidates = load_candidates(source, location, onboarded_only)

            matcher = SupporterMatcher(app_config.matching)
            results = matcher.match(candidates, preferences)
            if args.best:
                results = results[:1]
            elif args.top:
                results = results[: args.top]

            if args.format == "json":
                output = json.dumps(build_match_payload(results), indent=2, ensure_ascii=False)
            else:
                output = ReportRenderer().render(results, preferences)

        print(output)
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except DirectoryError as e:
        print(f"Directory Error: {e}", file=sys.stderr)
        logger.error(
            f"Directory error: {e}",
            extra={"event": "matching.request.failed", "error_type": type(e).__name__},
        )
        return 1
    except ReportRenderError as e:
        print(f"Report Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
