#!/usr/bin/env python3

import json
import sys
from datetime import date, datetime
from pathlib import Path

from models.turnover_filter import TurnoverFilter

FILTER_DATE_FORMAT = "%d.%m.%Y"


def resolve_date_range(from_date, to_date, today=None):
    """Resolve the export date range, both ends as DD.MM.YYYY strings.

    --to defaults to today and --from to one month before --to.

    Raises:
        ValueError: If a given date is not in DD.MM.YYYY format.
    """
    from dateutil.relativedelta import relativedelta

    end = (
        datetime.strptime(to_date, FILTER_DATE_FORMAT).date()
        if to_date
        else (today or date.today())
    )
    start = (
        datetime.strptime(from_date, FILTER_DATE_FORMAT).date()
        if from_date
        else end - relativedelta(months=1)
    )
    return start.strftime(FILTER_DATE_FORMAT), end.strftime(FILTER_DATE_FORMAT)


def _write_json(path: Path, data) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def cmd_export(args, services):
    """Export every account's reserved funds and turnover as ledger entries.

    Writes accounts.json plus one transactions_{currency}_{number}.json per
    account into the output directory.

    Args:
        args: Parsed command-line arguments with from_date, to_date, output_dir
        services: Services container with accounts and transactions services
    """
    logger = services.logger

    try:
        from_date, to_date = resolve_date_range(args.from_date, args.to_date)
    except ValueError as e:
        logger.error(f"Invalid date format: {e}")
        logger.error("Use DD.MM.YYYY format for --from and --to")
        sys.exit(1)

    output_dir = Path(args.output_dir) if args.output_dir else services.config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    accounts = services.accounts.all_account_balance()
    accounts_path = output_dir / "accounts.json"
    _write_json(accounts_path, [account.to_dict() for account in accounts])
    logger.info(f"Wrote {len(accounts)} account(s) to: {accounts_path}")

    logger.info(f"Exporting transactions from {from_date} to {to_date}")
    for account in accounts:
        turnover_filter = TurnoverFilter(
            currency_code_numeric=account.currency_code_numeric,
            from_date=from_date,
            to_date=to_date,
        )
        entries = services.transactions.ledger_entries(account, turnover_filter)

        path = output_dir / f"transactions_{account.currency_code}_{account.number}.json"
        _write_json(path, [entry.to_dict() for entry in entries])
        logger.info(f"✓ Exported {len(entries)} entries for {account.number} to: {path}")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Export transactions",
        description="Export settled and reserved transactions as ledger entries",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        dest="subcommand",
        required=True,
    )

    export_parser = transactions_subparsers.add_parser(
        "export", help="Export transactions of all accounts to JSON"
    )
    export_parser.add_argument(
        "--from",
        dest="from_date",
        help="Start date in DD.MM.YYYY format (default: one month before --to)",
    )
    export_parser.add_argument(
        "--to",
        dest="to_date",
        help="End date in DD.MM.YYYY format (default: today)",
    )
    export_parser.add_argument(
        "--output-dir",
        help="Directory for the JSON files (default: configured output_dir)",
    )
    export_parser.set_defaults(func=cmd_export)
