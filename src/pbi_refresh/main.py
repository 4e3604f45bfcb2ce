"""Command-line entry point."""

import argparse
import asyncio
import logging
import sys

import httpx
from pydantic import ValidationError

from .config import Config, setup_logging
from .consts import APP_NAME, PACKAGE_VERSION
from .exceptions import ConfigError
from .loader import describe_validation_error, load_credentials, load_dataset_target
from .models import RefreshResult
from .workflow import create_http_client, run_refresh

logger = logging.getLogger("pbi-refresh.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Trigger a Power BI dataset refresh using password-grant credentials.",
    )
    parser.add_argument(
        "--secrets", dest="secrets_file", help="TOML secrets file (default: secrets.toml)"
    )
    parser.add_argument(
        "--dataset", dest="dataset_file", help="JSON dataset file (default: dataset.json)"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {PACKAGE_VERSION}"
    )
    return parser


def report(result: RefreshResult) -> None:
    """Write the single status line for a run."""
    if result.success:
        print(result.status_line())
        return

    print(result.status_line(), file=sys.stderr)
    for suggestion in result.suggestions:
        print(f"  - {suggestion}", file=sys.stderr)


async def run(config: Config, *, transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Load both files, run the workflow and report the outcome.

    Returns:
        Process exit code.
    """
    try:
        credentials = load_credentials(config.secrets_file)
        target = load_dataset_target(config.dataset_file)
    except ConfigError as e:
        logger.error(f"Configuration failed: {e.message}")
        result = RefreshResult.from_error(e)
    else:
        async with create_http_client(config, transport) as client:
            result = await run_refresh(
                credentials, target, config=config, http_client=client
            )

    report(result)
    return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    overrides = {k: v for k, v in vars(args).items() if v is not None}

    try:
        config = Config(**overrides)
    except ValidationError as e:
        result = RefreshResult.from_error(
            ConfigError(
                "Invalid settings",
                errors=describe_validation_error(e),
                suggestions=["Check PBIREFRESH_* environment variables"],
            )
        )
        report(result)
        return result.exit_code

    setup_logging(config.log_level)
    logger.debug(f"Starting with {config!r}")
    return asyncio.run(run(config))


if __name__ == "__main__":
    sys.exit(main())
