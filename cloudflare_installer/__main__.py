"""Installer entry point."""

import logging
import sys

from pydantic import ValidationError

from cloudflare_installer.cli.app import cli
from cloudflare_installer.config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main():
    """Main entry point."""
    try:
        config = get_config()
    except ValidationError as e:
        # Show clean error message instead of full traceback
        print(f"\nError: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=config.runtime.effective_log_level, format=LOG_FORMAT)
    cli()


if __name__ == "__main__":
    main()
