"""``finnhub`` command line: one subcommand per client endpoint."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, Awaitable, Callable, Optional

import typer
from dotenv import load_dotenv
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from finnhubapi.client import FinnhubClient
from finnhubapi.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from finnhubapi.errors import FinnhubError
from finnhubapi.models.identifiers import ExchangeCode, Symbol
from finnhubapi.models.result import ApiResult

app = typer.Typer(
    name="finnhub",
    help="Interact with the Finnhub API.",
    epilog="The market can stay irrational longer than you can remain solvent.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True, soft_wrap=True)

Call = Callable[[FinnhubClient], Awaitable[ApiResult[Any]]]

SymbolArg = Annotated[str, typer.Argument(help="The company stock symbol")]


@dataclass
class CliOptions:
    token: str | None
    base_url: str
    timeout: float
    show_rate_limit: bool


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    token: Annotated[
        Optional[str],
        typer.Option(
            "--token",
            envvar=["FINNHUB_TOKEN", "FINNHUB_API_KEY"],
            help="Set the Finnhub API token",
        ),
    ] = None,
    base_url: Annotated[
        str,
        typer.Option("--base-url", envvar="FINNHUB_BASE_URL", help="Finnhub API root URL"),
    ] = DEFAULT_BASE_URL,
    timeout: Annotated[
        float,
        typer.Option("--timeout", envvar="FINNHUB_TIMEOUT", help="Request timeout in seconds"),
    ] = DEFAULT_TIMEOUT,
    rate_limit: Annotated[
        bool,
        typer.Option("--rate-limit", help="Print rate-limit counters to stderr"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    setup_logging(verbose)
    ctx.obj = CliOptions(
        token=token,
        base_url=base_url,
        timeout=timeout,
        show_rate_limit=rate_limit,
    )


def to_wire(value: Any) -> Any:
    """Render a decoded payload with the service's JSON key names."""
    if isinstance(value, list):
        return [to_wire(item) for item in value]
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def _run(ctx: typer.Context, call: Call) -> None:
    options: CliOptions = ctx.obj

    async def execute() -> ApiResult[Any]:
        client = FinnhubClient(
            token=options.token or "",
            base_url=options.base_url,
            timeout=options.timeout,
        )
        async with client:
            return await call(client)

    try:
        result = asyncio.run(execute())
    except FinnhubError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    console.print_json(data=to_wire(result.value))
    if options.show_rate_limit:
        _print_rate_limit(result)


def _print_rate_limit(result: ApiResult[Any]) -> None:
    snapshot = result.rate_limit
    if snapshot is None:
        err_console.print("[dim]Rate limit: not reported[/dim]")
        return
    seconds = int(snapshot.time_until_reset().total_seconds())
    err_console.print(
        f"[dim]Rate limit: {snapshot.remaining}/{snapshot.limit} remaining, "
        f"resets {snapshot.reset.isoformat()} (in {seconds}s)[/dim]"
    )


@app.command("exchanges")
def exchanges(ctx: typer.Context) -> None:
    """List supported exchanges."""
    _run(ctx, lambda client: client.exchanges())


@app.command("symbols")
def symbols(
    ctx: typer.Context,
    exchange: Annotated[str, typer.Argument(help="The exchange to query")],
) -> None:
    """List supported stocks for an exchange."""
    _run(ctx, lambda client: client.symbols(ExchangeCode(exchange)))


@app.command("quote")
def quote(ctx: typer.Context, symbol: SymbolArg) -> None:
    """Get quote data. Constant polling is not recommended."""
    _run(ctx, lambda client: client.quote(Symbol(symbol)))


@app.command("news")
def news(
    ctx: typer.Context,
    category: Annotated[str, typer.Argument(help="general, forex, crypto or merger")],
) -> None:
    """Get general market news."""
    _run(ctx, lambda client: client.news(category))


@app.command("news-sentiment")
def news_sentiment(ctx: typer.Context, symbol: SymbolArg) -> None:
    """Get company's news sentiment and statistics for US companies."""
    _run(ctx, lambda client: client.news_sentiment(Symbol(symbol)))


@app.command("company-news")
def company_news(
    ctx: typer.Context,
    symbol: SymbolArg,
    start: Annotated[
        Optional[datetime],
        typer.Option("--from", formats=["%Y-%m-%d"], help="First day (YYYY-MM-DD)"),
    ] = None,
    end: Annotated[
        Optional[datetime],
        typer.Option("--to", formats=["%Y-%m-%d"], help="Last day (YYYY-MM-DD)"),
    ] = None,
) -> None:
    """List latest company news by symbol. Only available for US companies."""
    _run(
        ctx,
        lambda client: client.company_news(
            Symbol(symbol),
            start=start.date() if start else None,
            end=end.date() if end else None,
        ),
    )


@app.command("peers")
def peers(ctx: typer.Context, symbol: SymbolArg) -> None:
    """Get company peers in the same country and GICS sub-industry."""
    _run(ctx, lambda client: client.peers(Symbol(symbol)))


@app.command("executives")
def executives(ctx: typer.Context, symbol: SymbolArg) -> None:
    """Get company executives and members of the board."""
    _run(ctx, lambda client: client.executives(Symbol(symbol)))


@app.command("price-target")
def price_target(ctx: typer.Context, symbol: SymbolArg) -> None:
    """Get the latest analyst price-target consensus."""
    _run(ctx, lambda client: client.price_target(Symbol(symbol)))


@app.command("recommendations")
def recommendations(ctx: typer.Context, symbol: SymbolArg) -> None:
    """Get analyst recommendation trends."""
    _run(ctx, lambda client: client.recommendations(Symbol(symbol)))


def run() -> None:
    """Console-script entry point; loads ``.env`` before parsing options."""
    load_dotenv()
    app()


if __name__ == "__main__":
    run()
