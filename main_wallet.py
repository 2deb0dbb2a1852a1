"""Mini README: Command line entry point for the WalletLedger tracker.

This script exposes a Typer CLI standing in for the app's screens: it records
income and expenses, lists them with the income/expense filter, deletes rows
by their position in the filtered list, and clears everything after an
explicit confirmation. Settings come from ``WALLETLEDGER_*`` environment
variables when available.
"""

from __future__ import annotations

import typer

from walletledger.configuration import get_settings
from walletledger.controller import WalletController
from walletledger.ledger import FilterMode, LedgerStore, ValidationError, describe, format_amount
from walletledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Track income and expenses in a local JSON ledger.")

FILTER_HELP = "Which transactions to show: all, income or expense."


def _controller(filter_name: str = "all") -> WalletController:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = LedgerStore.open(settings.ledger_path)
    return WalletController(store, mode=FilterMode.coerce(filter_name))


def _report_save_warning(controller: WalletController) -> None:
    if controller.last_save_warning:
        typer.echo(f"Warning: {controller.last_save_warning}", err=True)


@cli.command()
def add(
    kind: str = typer.Argument(..., help="income or expense (Gelir/Gider)."),
    category: str = typer.Argument(..., help="Category from the kind's list."),
    amount: str = typer.Argument(..., help="Amount as typed, for example 1500 or 12.5."),
) -> None:
    """Record a new transaction at the top of the ledger."""

    controller = _controller()
    try:
        transaction = controller.on_add_transaction(kind, category, amount)
    except ValidationError as error:
        typer.echo(f"Error: {error}", err=True)
        if error.field == "category":
            try:
                choices = ", ".join(controller.categories_for(kind))
            except ValidationError:
                choices = ""
            if choices:
                typer.echo(f"Available categories: {choices}", err=True)
        raise typer.Exit(code=1)
    symbol = get_settings().currency_symbol
    typer.echo(f"Recorded {describe([transaction], symbol)[0]}")
    typer.echo(f"Balance: {format_amount(controller.get_balance(), symbol)}")
    _report_save_warning(controller)


@cli.command("list")
def list_transactions(
    filter_name: str = typer.Option("all", "--filter", "-f", help=FILTER_HELP),
) -> None:
    """Show the balance and the filtered transaction list, newest first."""

    controller = _controller(filter_name)
    symbol = get_settings().currency_symbol
    typer.echo(f"Balance: {format_amount(controller.get_balance(), symbol)}")
    for row, line in enumerate(describe(controller.get_filtered_view(), symbol)):
        typer.echo(f"{row:>3}  {line}")


@cli.command()
def delete(
    row: int = typer.Argument(..., help="Row number as printed by 'list'."),
    filter_name: str = typer.Option("all", "--filter", "-f", help=FILTER_HELP),
) -> None:
    """Delete the transaction shown at ROW in the filtered list."""

    controller = _controller(filter_name)
    try:
        removed = controller.on_delete_row(row)
    except IndexError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    symbol = get_settings().currency_symbol
    typer.echo(f"Deleted {describe([removed], symbol)[0]}")
    typer.echo(f"Balance: {format_amount(controller.get_balance(), symbol)}")
    _report_save_warning(controller)


@cli.command()
def balance() -> None:
    """Print the running balance."""

    controller = _controller()
    typer.echo(format_amount(controller.get_balance(), get_settings().currency_symbol))


@cli.command()
def summary() -> None:
    """Print totals and the per-category breakdown."""

    controller = _controller()
    symbol = get_settings().currency_symbol
    totals = controller.get_summary()
    typer.echo(f"Transactions: {totals['transaction_count']}")
    typer.echo(f"Income: {format_amount(totals['income_total'], symbol)}")
    typer.echo(f"Expense: {format_amount(totals['expense_total'], symbol)}")
    typer.echo(f"Balance: {format_amount(totals['balance'], symbol)}")
    for (kind, category), amount in controller.get_category_totals().items():
        typer.echo(f"  {kind.value} / {category}: {format_amount(amount, symbol)}")


@cli.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete every transaction. This cannot be undone."""

    if not yes:
        typer.confirm("Delete all transactions? This cannot be undone.", abort=True)
    controller = _controller()
    controller.on_clear_all()
    typer.echo("All transactions deleted.")
    _report_save_warning(controller)


if __name__ == "__main__":
    cli()
