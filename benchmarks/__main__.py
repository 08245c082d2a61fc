"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer
from rich.table import Table

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CALLS_BY_RUN, CONSOLE, Row, collect_timings

app = typer.Typer(help="Benchmarks for pyoranges developments.")


@app.command(name="list")
def list_benchmarks() -> None:
    """Show all registered benchmarks."""
    for b in BENCHMARKS:
        CONSOLE.print(f"{b.category}: {b.name} ({len(b.variants)} sizes)")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", help="Only run benchmarks of this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    selected = [b for b in BENCHMARKS if category is None or b.category == category]
    if not selected:
        CONSOLE.print("No benchmarks registered!", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(_to_table(collect_timings(selected)))
    CONSOLE.print("✓ Benchmarks complete", style="bold green")


def _to_table(rows: list[Row]) -> Table:
    table = Table(title="Median time per call")
    for column in ("category", "name", "size", "runs"):
        table.add_column(column)
    table.add_column("median (µs)", justify="right")
    for row in rows:
        table.add_row(
            row.category,
            row.name,
            str(row.size),
            str(row.runs),
            f"{row.median / CALLS_BY_RUN * 1e6:.2f}",
        )
    return table


if __name__ == "__main__":
    app()
