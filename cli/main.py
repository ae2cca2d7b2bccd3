"""CLI entry point — Typer app for manda commands.

Usage:
    manda ask "How long does a transfer take?"
    manda chat --responder site_faq
    manda benchmarks tech --metric revenue_growth
    manda compare tech revenue_growth=25 profit_margin=12
    manda trend tech revenue_growth --years 5
    manda feed tech revenue_growth profit_margin --ticks 3
    manda industries
    manda status
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="manda",
    help="M&A advisor toolkit — knowledge responder and industry benchmarks.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level",
    ),
) -> None:
    """Configure logging before any command runs."""
    from manda.config import configure_logging, load_settings

    settings = load_settings()
    if log_level:
        settings.logging.level = log_level.upper()
    configure_logging(settings.logging)


def _chat_service(responder: str | None):
    from manda.config import load_settings
    from manda.knowledge.chat import ChatService
    from manda.knowledge.factory import responder_from_settings

    settings = load_settings()
    return ChatService(
        responder_from_settings(settings, responder),
        reply_delay=settings.responder.reply_delay,
    )


def _parse_metrics(pairs: list[str]) -> dict[str, float]:
    metrics: dict[str, float] = {}
    for pair in pairs:
        metric_id, sep, raw = pair.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected metric=value, got '{pair}'")
        try:
            metrics[metric_id.strip()] = float(raw)
        except ValueError as exc:
            raise typer.BadParameter(f"Not a number: '{raw}'") from exc
    return metrics


def _results_table(title: str, results: dict, show_value: bool = False) -> Table:
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    if show_value:
        table.add_column("Company", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Trend")
    table.add_column("Change %", justify="right")

    for metric_id, r in results.items():
        row = [metric_id]
        if show_value:
            row.append(f"{r.value:,.2f}")
        row += [
            f"{r.average:,.2f}",
            f"{r.max_value:,.2f}",
            r.trend.value,
            f"{r.change_percent:+.1f}",
        ]
        table.add_row(*row)
    return table


# ---------------------------------------------------------------------------
# Knowledge responder
# ---------------------------------------------------------------------------


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question for Emilia"),
    responder: str | None = typer.Option(
        None, "--responder", "-r", help="Responder (knowledge_base, site_faq, deepseek)",
    ),
) -> None:
    """Ask a single question."""
    from manda.knowledge.schemas import ChatMessage, Role

    service = _chat_service(responder)
    completion = asyncio.run(service.send([ChatMessage(Role.USER, question)]))

    console.print(f"\n[bold]Q:[/] {question}")
    console.print(f"\n[bold green]A:[/] {completion.content}")
    console.print(f"\n[dim]Model: {completion.model}[/]")


@app.command()
def chat(
    responder: str | None = typer.Option(
        None, "--responder", "-r", help="Responder (knowledge_base, site_faq, deepseek)",
    ),
) -> None:
    """Interactive chat session. Type 'quit' or 'exit' to leave."""
    from manda.knowledge.chat import ChatSession
    from manda.knowledge.persona import MOOD_TEXTS

    session = ChatSession(_chat_service(responder))
    console.print(f"[bold green]Emilia:[/] {session.transcript[0].content}")

    while True:
        try:
            text = typer.prompt("You")
        except typer.Abort:
            break
        if text.strip().lower() in {"quit", "exit"}:
            break
        if not text.strip():
            continue
        answer = asyncio.run(session.ask(text))
        console.print(f"[bold green]Emilia:[/] {answer}")
        console.print(f"[dim]{MOOD_TEXTS[session.mood]}[/]")


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


@app.command()
def benchmarks(
    industry: str = typer.Argument(..., help="Industry id (see 'manda industries')"),
    subcategory: str | None = typer.Option(None, "--subcategory", "-s", help="Subcategory id"),
    year: int | None = typer.Option(None, "--year", "-y", help="Benchmark year"),
    quarter: int | None = typer.Option(None, "--quarter", "-q", help="Benchmark quarter"),
    metric: list[str] | None = typer.Option(
        None, "--metric", "-m", help="Only show these metrics",
    ),
) -> None:
    """Show industry benchmarks."""
    from manda.benchmarks.service import BenchmarkService
    from manda.config import load_settings

    service = BenchmarkService(load_settings().benchmarks)
    results = service.fetch_benchmarks(industry, subcategory, year, quarter)
    if metric:
        results = {k: v for k, v in results.items() if k in metric}

    console.print(_results_table(f"Benchmarks: {industry}", results))


@app.command()
def compare(
    industry: str = typer.Argument(..., help="Industry id"),
    metrics: list[str] = typer.Argument(..., help="Company metrics as metric=value"),
    subcategory: str | None = typer.Option(None, "--subcategory", "-s", help="Subcategory id"),
) -> None:
    """Compare company metrics against industry benchmarks."""
    from manda.benchmarks.service import BenchmarkService
    from manda.config import load_settings

    company = _parse_metrics(metrics)
    service = BenchmarkService(load_settings().benchmarks)
    results = service.compare_to_company(industry, company, subcategory)
    shown = {k: v for k, v in results.items() if k in company}

    console.print(_results_table(f"Company vs {industry}", shown, show_value=True))


@app.command()
def trend(
    industry: str = typer.Argument(..., help="Industry id"),
    metric: str = typer.Argument(..., help="Metric id"),
    years: int = typer.Option(5, "--years", "-n", help="Number of years"),
) -> None:
    """Show a synthetic yearly history for one metric."""
    from manda.benchmarks.service import BenchmarkService
    from manda.config import load_settings

    service = BenchmarkService(load_settings().benchmarks)
    points = service.metric_trend_data(industry, metric, years=years)

    table = Table(title=f"{metric} ({industry})")
    table.add_column("Year", style="cyan")
    table.add_column("Value", justify="right")
    for p in points:
        table.add_row(p.date, f"{p.value:,.2f}")
    console.print(table)


@app.command()
def feed(
    industry: str = typer.Argument(..., help="Industry id"),
    metrics: list[str] = typer.Argument(..., help="Metric ids to follow"),
    ticks: int = typer.Option(3, "--ticks", "-n", help="Updates to print before exiting"),
    transport: str | None = typer.Option(
        None, "--transport", "-t", help="Push transport (mock, websocket, none)",
    ),
    interval: float | None = typer.Option(
        None, "--interval", "-i", help="Poll interval in seconds",
    ),
) -> None:
    """Follow live benchmark updates."""
    asyncio.run(_follow_feed(industry, metrics, ticks, transport, interval))


async def _follow_feed(
    industry: str,
    metrics: list[str],
    ticks: int,
    transport: str | None,
    interval: float | None,
) -> None:
    from manda.benchmarks.factory import transport_factory
    from manda.benchmarks.feed import LiveBenchmarkFeed
    from manda.benchmarks.schemas import FeedCallbacks
    from manda.benchmarks.server import SimulatedBenchmarkServer
    from manda.benchmarks.service import BenchmarkService
    from manda.config import load_settings

    settings = load_settings()
    cfg = settings.feed
    if interval is not None:
        cfg = cfg.model_copy(update={"poll_interval": interval})

    name = (transport or cfg.transport).lower()
    factory = None
    if name == "mock":
        factory = transport_factory(
            "mock",
            server=SimulatedBenchmarkServer(),
            broadcast_interval=cfg.poll_interval,
        )
    elif name == "websocket":
        factory = transport_factory("websocket", host=cfg.host, secure=cfg.secure, path=cfg.path)

    callbacks = FeedCallbacks(
        on_connected=lambda: console.print("[green]Connected[/]"),
        on_disconnected=lambda: console.print("[yellow]Disconnected[/]"),
        on_error=lambda exc: console.print(f"[red]Error:[/] {exc}"),
    )

    queue: asyncio.Queue = asyncio.Queue()
    live = LiveBenchmarkFeed(BenchmarkService(settings.benchmarks), factory, settings=cfg)
    async with live:
        live.subscribe(queue.put_nowait)
        snapshot = await live.start(industry, metrics, callbacks=callbacks)
        if not snapshot:
            console.print("[red]No known metrics to follow.[/] See 'manda status'.")
            raise typer.Exit(code=1)
        console.print(_results_table(f"Live: {industry} (initial)", snapshot))
        for n in range(1, ticks + 1):
            update = await queue.get()
            console.print(_results_table(f"Live: {industry} (update {n}, {live.mode.value})", update))


# ---------------------------------------------------------------------------
# Catalog / status
# ---------------------------------------------------------------------------


@app.command()
def industries() -> None:
    """List industries and their subcategories."""
    from manda.benchmarks.catalog import INDUSTRIES

    table = Table(title="Industries")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Subcategories")

    for ind in INDUSTRIES:
        table.add_row(ind.id, ind.name, ", ".join(s.id for s in ind.subcategories))

    console.print(table)


@app.command()
def status() -> None:
    """Show available components and active configuration."""
    from manda.benchmarks.catalog import INDUSTRIES, METRICS
    from manda.benchmarks.factory import available_transports
    from manda.config import load_settings
    from manda.knowledge.factory import available_responders

    settings = load_settings()
    console.print("\n[bold green]manda-advisor[/] v0.1.0\n")

    table = Table(title="Available Components")
    table.add_column("Layer", style="cyan")
    table.add_column("Available")

    table.add_row("Responders", ", ".join(available_responders()))
    table.add_row("Feed Transports", ", ".join(available_transports()))
    table.add_row("Industries", str(len(INDUSTRIES)))
    table.add_row("Metrics", str(len(METRICS)))
    table.add_row("Default Responder", settings.responder.provider)
    table.add_row("Feed Transport", settings.feed.transport)

    console.print(table)


if __name__ == "__main__":
    app()
