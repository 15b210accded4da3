"""``python -m margincalc`` entry point: pricing commands or the HTTP API."""

from enum import Enum

import typer

from margincalc.cli import app as cli_app


class RunMode(str, Enum):
    CLI = "cli"
    API = "api"


app = typer.Typer(
    help="Pricing and margin calculator. Run the calc commands or serve the HTTP API.",
    no_args_is_help=False,
)
app.add_typer(cli_app, name="", help="Pricing calculator commands.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    mode: RunMode = typer.Option(
        RunMode.CLI,
        "--mode",
        case_sensitive=False,
        help="cli runs the calculator commands; api serves /pricing/calculate",
    ),
) -> None:
    """Pricing and margin calculator. Run the calc commands or serve the HTTP API."""
    if mode is RunMode.API:
        from margincalc import api

        api.main()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
