"""Main CLI entry point."""

import logging

import click
from ermay.database.factories import create_sqlite_database

# Import and register all commands at module level
from ermay.cli.commands import (
    customer,
    supplier,
    customer_records,
    supplier_records,
    report,
)


def _shows_help(ctx: click.Context) -> bool:
    """True if the subcommand line only asks for help or usage."""
    args = ctx.args
    return not args or any(arg in ctx.help_option_names for arg in args)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ERMAY_DB_PATH environment variable)",
    envvar="ERMAY_DB_PATH",
)
@click.option(
    "--owner",
    "owner_id",
    help="Account owner ID every record belongs to (or ERMAY_OWNER); required to run a command",
    envvar="ERMAY_OWNER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, owner_id: str | None, verbose: bool):
    """ERMAY - Customer and supplier ledgers.

    Record sales, purchases and payments in TRY, USD and EUR, and view
    per-currency balances and account statements.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.obj["owner_id"] = owner_id

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and not _shows_help(ctx):
        if not owner_id:
            raise click.UsageError("Missing option '--owner' (or set ERMAY_OWNER).", ctx=ctx)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
customer.register_commands(cli)
supplier.register_commands(cli)
customer_records.register_commands(cli)
supplier_records.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
