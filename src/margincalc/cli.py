"""CLI interface for the margin calculator."""

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from margincalc.config import get_config
from margincalc.exceptions import ContractError
from margincalc.formatting import PERCENT_FRACTION_DIGITS, format_money, format_number
from margincalc.models import PricingRequest, PricingResponse
from margincalc.normalizer import DiscountMode
from margincalc.service import build_service
from margincalc.translations import discount_label, get_translation

app = typer.Typer(
    name="margincalc",
    help="""
    [bold]Margin Calculator CLI[/bold]

    Net price, gross profit, margin, markup and the price needed to hit a
    target margin for a single product.

    [cyan]Examples:[/cyan]
      margincalc calc --price 100 --cost 60 --discount 10
      margincalc calc -p 100 -c 60 -d 15 --discount-mode amount --target 40
      margincalc calc -p 100 -c 60 --lang bm --json
      margincalc labels --lang bm
    """,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@app.command()
def calc(
    price: Optional[str] = typer.Option(
        None, "--price", "-p", help="Selling (list) price before discount"
    ),
    cost: Optional[str] = typer.Option(None, "--cost", "-c", help="Unit cost"),
    discount: Optional[str] = typer.Option(
        None, "--discount", "-d", help="Discount value (percent or amount)"
    ),
    discount_mode: DiscountMode = typer.Option(
        DiscountMode.PERCENTAGE,
        "--discount-mode",
        "-m",
        case_sensitive=False,
        help="Interpret the discount as a percentage (pct) or an amount",
    ),
    target: Optional[str] = typer.Option(
        None, "--target", "-t", help="Target margin in percent (default from config)"
    ),
    lang: Optional[str] = typer.Option(None, "--lang", help="Label language (en, bm)"),
    currency: Optional[str] = typer.Option(
        None, "--currency", help="Currency symbol override (e.g. RM, $)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show detailed processing information"
    ),
):
    """Calculate pricing metrics for one product."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = get_config()
        if currency:
            config = config.model_copy(update={"currency_symbol": currency})

        service = build_service(config)
        response = service.build_response(
            PricingRequest(
                list_price=price,
                unit_cost=cost,
                discount_mode=discount_mode,
                discount_value=discount,
                target_margin_pct=target,
                language=lang,
            )
        )
    except ContractError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e.message}")
        raise typer.Exit(code=1)

    logger.debug("normalized inputs: %s", response.inputs)

    if as_json:
        print(json.dumps(response.model_dump(mode="json"), indent=2))
        return

    _print_response(response)


def _print_response(response: PricingResponse) -> None:
    """Render a response as a Rich table."""
    translation = get_translation(response.language)
    inputs = response.inputs

    table = Table(title=translation.title, show_header=False)
    table.add_column("label", style="dim")
    table.add_column("value", justify="right")

    fields = translation.product_fields
    symbol = response.currency_symbol
    if inputs.discount_mode is DiscountMode.AMOUNT:
        discount_text = format_money(symbol, inputs.discount_value)
    else:
        discount_text = f"{format_number(inputs.discount_value, PERCENT_FRACTION_DIGITS)}%"
    table.add_row(fields.list_price, format_money(symbol, inputs.list_price))
    table.add_row(fields.unit_cost, format_money(symbol, inputs.unit_cost))
    table.add_row(discount_label(translation, inputs.discount_mode), discount_text)
    table.add_row(
        fields.target_margin_pct,
        f"{format_number(inputs.target_margin_pct, PERCENT_FRACTION_DIGITS)}%",
    )
    table.add_section()

    display = response.display.model_dump()
    for key, label in response.labels.items():
        style = "bold" if key == "net_price" else None
        table.add_row(label, display[key], style=style)

    console.print(table)
    console.print(f"[dim]{translation.notes}[/dim]")


@app.command()
def labels(
    lang: Optional[str] = typer.Option(
        None, "--lang", help="Label language (en, bm; default from config)"
    ),
):
    """Show the label table for a language."""
    try:
        translation = get_translation(lang or get_config().default_language)
    except ContractError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e.message}")
        raise typer.Exit(code=1)

    print(json.dumps(translation.model_dump(mode="json"), indent=2, ensure_ascii=False))


@app.command()
def version():
    """Show version information."""
    console.print("margincalc version 0.1.0")


if __name__ == "__main__":
    app()
