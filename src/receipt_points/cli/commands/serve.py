"""HTTP server command."""

import click
import uvicorn

from receipt_points.api.app import create_app


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=8080, show_default=True, type=int, help="Port to listen on")
@click.pass_context
def serve(ctx, host: str, port: int):
    """Run the receipt points HTTP service.

    Endpoints:
        POST /receipts/process       submit a receipt, returns {"id": ...}
        GET  /receipts/{id}/points   returns {"points": ...}
    """
    app = create_app(ctx.obj["db"])
    click.echo(f"Serving on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=ctx.obj["log_level"].lower())


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
