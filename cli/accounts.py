#!/usr/bin/env python3


def cmd_list(args, services):
    """List balances of all accounts."""
    logger = services.logger
    accounts = services.accounts.all_account_balance()

    if not accounts:
        logger.info("No accounts found.")
        return

    logger.info("\nAccounts:")
    logger.info("=" * 80)
    for account in accounts:
        logger.info(f"Number: {account.number}")
        logger.info(f"Description: {account.description}")
        logger.info(f"Currency: {account.currency_code} ({account.currency_code_numeric})")
        logger.info(f"Total: {account.total_amount}")
        logger.info(f"Available: {account.available_amount}")
        if account.last_transaction_date:
            logger.info(
                f"Last transaction: {account.last_transaction_amount} "
                f"on {account.last_transaction_date.isoformat()}"
            )
        logger.info("-" * 80)

    logger.info(f"\nTotal accounts: {len(accounts)}")


def cmd_dashboard(args, services):
    """List the dashboard summary of all accounts."""
    logger = services.logger
    accounts = services.accounts.dashboard_preview()

    if not accounts:
        logger.info("No accounts found.")
        return

    for account in accounts:
        logger.info(
            f"{account.number} {account.currency_code}: "
            f"total {account.total_amount}, available {account.available_amount}, "
            f"reserved {account.reserved_amount}"
        )


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="List accounts",
        description="List accounts and their balances",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        dest="subcommand",
        required=True,
    )

    list_parser = accounts_subparsers.add_parser("list", help="List account balances")
    list_parser.set_defaults(func=cmd_list)

    dashboard_parser = accounts_subparsers.add_parser(
        "dashboard", help="Show the dashboard summary"
    )
    dashboard_parser.set_defaults(func=cmd_dashboard)
