"""
Command-line interface for the Product Scraper API server.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import LOG_LEVELS, get_config
from .app import start_server

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    server_config = get_config().server
    parser = argparse.ArgumentParser(description="Start the Product Scraper API server")

    parser.add_argument(
        "--host",
        type=str,
        default=server_config.host,
        help="Host to bind the server to (default: 0.0.0.0 or HOST env var)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=server_config.port,
        help="Port to bind the server to (default: 3000 or PORT env var)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=server_config.log_level,
        help="Set the logging level (default: INFO or LOG_LEVEL env var)",
    )

    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parsed_args = parse_args(args)

    # Set logging level
    logging.getLogger().setLevel(getattr(logging, parsed_args.log_level))

    logger.info(
        f"Starting Product Scraper API server on {parsed_args.host}:{parsed_args.port}"
    )

    try:
        start_server(
            host=parsed_args.host, port=parsed_args.port, reload=parsed_args.reload
        )
        return 0
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.error(f"Error starting server: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
