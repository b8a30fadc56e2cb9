"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, collect_timings, render

app = typer.Typer(help="Benchmarks for underbar developments.")


@app.command(name="list")
def list_benchmarks() -> None:
    """Show all registered benchmarks."""
    for benchmark in BENCHMARKS:
        CONSOLE.print(f"{benchmark.category}.{benchmark.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only run benchmarks of this class."),
    ] = None,
) -> None:
    """Run benchmarks and print median timings."""
    selected = [b for b in BENCHMARKS if category in (None, b.category)]
    if not selected:
        CONSOLE.print(f"No benchmark matches {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(render(collect_timings(selected)))
    CONSOLE.print("✓ Done", style="bold green")


if __name__ == "__main__":
    app()
