"""
Main Entry Point Module

Top-level handler for the Typed Post Client. This is the one place that
decides what a failure means to the end user:

1. Create the post through the API client
2. Report every failure to the error sink
3. Crash on network errors
4. Map every other failure to a generic, non-leaking message

Anything that runs at the top level (a CLI, a web controller, a job)
can call ``run`` and show ``error_message`` as is.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Dict, Optional, Type

from .config import config
from .api import (
    APIClient,
    APIError,
    JsonError,
    NetworkError,
    ParseError,
    StatusError,
    UserDoesNotExistError,
    ValidationError,
)


logger = logging.getLogger(__name__)


# Shown to end users; internal diagnostics never are
ERROR_MESSAGES: Dict[Type[APIError], str] = {
    UserDoesNotExistError: "User does not exist",
    StatusError: "Failed to create post",
    JsonError: "Failed to parse response",
    ValidationError: "Invalid post input",
    ParseError: "Failed to validate response",
}


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("post_client")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Already configured
    if logger.handlers:
        return logger

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='a',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


@dataclass
class RunResult:
    """Outcome of a top-level run, safe to show to a user."""
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error_message is None


def capture_error(error: BaseException) -> None:
    """
    Report a failure to the error sink.

    Logs the error with its traceback and cause chain. Swap this for a
    telemetry client (Sentry, OpenTelemetry) where one is available.
    """
    logger.error(f"{type(error).__name__}: {error}", exc_info=error)


async def run(
    user_id: int,
    title: str,
    body: str,
    client: Optional[APIClient] = None
) -> RunResult:
    """
    Create a post and translate the outcome for the end user.

    Args:
        user_id: Author user id.
        title: Post title.
        body: Post body.
        client: API client to use (a default one is created if None).

    Returns:
        RunResult with ``error_message`` set on a handled failure.

    Raises:
        NetworkError: If the service could not be reached.
    """
    client = client or APIClient()

    result = await client.create_post({
        "userId": user_id,
        "title": title,
        "body": body,
    })

    if result.is_ok:
        return RunResult()

    error = result.error
    capture_error(error)

    if isinstance(error, NetworkError):
        raise error

    return RunResult(error_message=ERROR_MESSAGES[type(error)])


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="post-client",
        description="Create a post through the typed API client"
    )
    parser.add_argument("--user-id", type=int, required=True, help="Author user id")
    parser.add_argument("--title", required=True, help="Post title (5+ chars)")
    parser.add_argument("--body", required=True, help="Post body (10+ chars)")
    parser.add_argument("--base-url", default=None,
                        help=f"API root (default: {config.api.base_url})")
    parser.add_argument("--log-level", default=config.log.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Console log level")
    return parser


def main(argv=None):
    """Main entry point for the post client."""
    args = build_parser().parse_args(argv)

    # Set up logging
    logger = setup_logging(args.log_level)

    try:
        result = asyncio.run(run(
            args.user_id,
            args.title,
            args.body,
            client=APIClient(base_url=args.base_url)
        ))

        # Exit with appropriate code
        if result.success:
            logger.info("Post created successfully!")
            sys.exit(0)
        else:
            logger.error(f"Post was not created: {result.error_message}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except NetworkError as e:
        logger.exception(f"Fatal network error: {e}")
        sys.exit(1)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
