"""CLI entry point for GRASP."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import structlog

from grasp.core.config import GraspConfig
from grasp.core.errors import GraspError
from grasp.core.logging import configure_logging

app = typer.Typer(
    name="grasp",
    help="Mine representative contiguous sequences from SPMF sequence databases",
)

logger = structlog.get_logger()


def _load_config(config_path: Optional[Path]) -> GraspConfig:
    if config_path is not None and config_path.exists():
        return GraspConfig.from_yaml(config_path)
    return GraspConfig()


@app.command()
def mine(
    input_path: Path = typer.Argument(..., help="SPMF sequence database"),
    output_path: Path = typer.Argument(..., help="Pattern file to write"),
    min_sup: Optional[int] = typer.Option(None, "--min-sup", "-s", help="Minimum absolute support"),
    max_gap: Optional[int] = typer.Option(None, "--max-gap", "-g", help="Maximum gap between transitions"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Graphs mined concurrently"),
    include_cover: bool = typer.Option(False, "--cover", help="Write #COVER: next to #SUP:"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to configuration file",
    ),
) -> None:
    """Mine representative sequences and stream them to a pattern file."""
    from grasp.data.spmf import SPMFParser
    from grasp.mining.miner import GraspMiner

    config = _load_config(config_path)
    configure_logging(config.log_level)

    if min_sup is not None:
        config.mining.min_support = min_sup
    if max_gap is not None:
        config.mining.max_gap = max_gap
    if workers is not None:
        config.mining.workers = workers

    try:
        sequences = SPMFParser().parse_sequences(input_path)
        miner = GraspMiner.from_config(config.mining)
        count = miner.mine_to_file(
            sequences,
            output_path,
            include_cover=include_cover or config.output.include_cover,
        )
    except GraspError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo(f"{count} patterns written to {output_path}")


@app.command()
def graphs(
    input_path: Path = typer.Argument(..., help="SPMF sequence database"),
    min_sup: int = typer.Option(2, "--min-sup", "-s", help="Support needed to count an edge as usable"),
) -> None:
    """Show the transition graphs extracted from a sequence database."""
    from grasp.data.spmf import SPMFParser
    from grasp.graph.sequence_graph import SequenceGraph, summarize

    configure_logging("WARNING")
    try:
        sequences = SPMFParser().parse_sequences(input_path)
    except GraspError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    summary = summarize(SequenceGraph.from_sequences(sequences), min_sup)
    typer.echo(f"Sequences: {len(sequences)}")
    typer.echo(f"Graphs: {len(summary)}")
    for row in summary:
        typer.echo(
            f"  graph {row['graph']}: {row['nodes']} nodes, {row['edges']} edges, "
            f"{row['supported_edges']} with support >= {min_sup}"
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
