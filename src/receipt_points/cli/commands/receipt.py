"""Receipt submission and lookup commands."""

import json

import click
from receipt_points.cli.error_handling import handle_domain_error
from receipt_points.domain.errors import DomainError, StorageError
from receipt_points.domain.receipt import ReceiptService
from receipt_points.utils.payload import receipt_from_payload, receipt_to_payload


@click.command("submit")
@click.argument(
    "receipt_file", type=click.File("r", encoding="utf-8"), metavar="RECEIPT_FILE"
)
@click.pass_context
def submit_receipt(ctx, receipt_file):
    """Submit a receipt JSON file and print its ID.

    Use '-' to read the receipt from standard input.

    Examples:
        receipt-points submit examples/target.json
        cat receipt.json | receipt-points submit -
    """
    db = ctx.obj["db"]
    service = ReceiptService(db)

    try:
        payload = json.load(receipt_file)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        click.echo(f"Error: Invalid JSON in {receipt_file.name}: {e}", err=True)
        ctx.exit(1)

    try:
        receipt_id = service.submit(receipt_from_payload(payload))
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(receipt_id)


@click.command("points")
@click.argument("receipt_id", metavar="RECEIPT_ID")
@click.pass_context
def show_points(ctx, receipt_id: str):
    """Print the points awarded to a stored receipt."""
    db = ctx.obj["db"]
    service = ReceiptService(db)

    try:
        points = service.lookup(receipt_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(points)


@click.command("show")
@click.argument("receipt_id", metavar="RECEIPT_ID")
@click.pass_context
def show_receipt(ctx, receipt_id: str):
    """Print a stored receipt as JSON."""
    db = ctx.obj["db"]
    service = ReceiptService(db)

    try:
        receipt = service.require_receipt(receipt_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(json.dumps(receipt_to_payload(receipt), indent=2))


def register_commands(cli):
    """Register receipt commands with main CLI."""
    cli.add_command(submit_receipt)
    cli.add_command(show_points)
    cli.add_command(show_receipt)
