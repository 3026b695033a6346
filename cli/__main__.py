#!/usr/bin/env python3
"""
Rolka CLI - Read-only access to the retail banking portal.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    accounts     List accounts and balances
    transactions Export transactions as ledger entries

Examples:
    python -m cli accounts list
    python -m cli accounts dashboard
    python -m cli transactions export --from 01.01.2025 --to 31.01.2025
"""

import sys
import argparse
from cli import accounts, transactions
from cli.credentials import login
from config import load_config
from models.exceptions import PortalError
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Rolka - Retail banking portal client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--username", help="Portal username (defaults to the configured one)"
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    accounts.setup_parser(subparsers)
    transactions.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        config = load_config()
        logger = setup_logging(config)
        try:
            services = Services(config, logger=logger)
            login(services, args.username)
            args.func(args, services)
        except PortalError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
