"""CLI for word-graph."""

import logging
from pathlib import Path
import random

import click

from .analysis.bridges import expand_text, find_bridges
from .analysis.cancel import CancellationToken, cancel_on_enter, cancel_on_interrupt
from .analysis.pagerank import compute_pagerank
from .analysis.paths import query_paths
from .analysis.walk import random_walk, write_walk
from .config import AnalysisConfig, load_config
from .errors import WordGraphError
from .graph.builder import WordGraph
from .graph.export import adjacency_lines, write_dot
from .report import format_bridges, format_pagerank, format_path_report, format_walk
from .session import GraphSession
from .text.tokenize import normalize_word

TEXT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file overriding analysis defaults",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool):
    """Word graph - bridge words, shortest paths and rankings for a text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_config(config_path)
    except WordGraphError as exc:
        raise click.ClickException(str(exc)) from exc


def _load_graph(text_file: Path) -> WordGraph:
    """Build the graph for a command, turning library errors into CLI errors."""
    try:
        return GraphSession.from_file(text_file).require_graph()
    except (WordGraphError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"{text_file}: {exc}") from exc


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
def show(text_file: Path):
    """Print every edge as 'source -> target (weight)'."""
    graph = _load_graph(text_file)
    for line in adjacency_lines(graph):
        click.echo(line)


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
def stats(text_file: Path):
    """Show node and edge counts."""
    click.echo(str(_load_graph(text_file).get_stats()))


@cli.command("export-dot")
@click.argument("text_file", type=TEXT_FILE)
@click.option(
    "--output", "-o", type=click.Path(path_type=Path), default=None, help="DOT file"
)
@click.pass_obj
def export_dot(config: AnalysisConfig, text_file: Path, output: Path | None):
    """Export the graph as a Graphviz DOT file."""
    graph = _load_graph(text_file)
    path = write_dot(graph, output or Path(config.dot_file))
    click.echo(f"DOT file written: {path}")


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
@click.option(
    "--output", "-o", type=click.Path(path_type=Path), default=None, help="HTML file"
)
@click.option("--max-nodes", type=int, default=None, help="Keep the most connected words")
@click.pass_obj
def visualize(
    config: AnalysisConfig, text_file: Path, output: Path | None, max_nodes: int | None
):
    """Write an interactive HTML view of the graph."""
    from .graph.visualize import create_web_visualization

    graph = _load_graph(text_file)
    path = create_web_visualization(
        graph, output or Path(config.html_file), max_nodes=max_nodes
    )
    click.echo(f"Visualization written: {path}")


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
@click.argument("word1", type=str)
@click.argument("word2", type=str)
def bridges(text_file: Path, word1: str, word2: str):
    """Find bridge words between WORD1 and WORD2."""
    graph = _load_graph(text_file)
    result = find_bridges(graph, normalize_word(word1), normalize_word(word2))
    click.echo(format_bridges(result))


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
@click.argument("text", type=str)
@click.option("--seed", type=int, default=None, help="Seed for bridge selection")
def expand(text_file: Path, text: str, seed: int | None):
    """Insert bridge words into TEXT."""
    graph = _load_graph(text_file)
    click.echo(expand_text(graph, text, rng=random.Random(seed)))


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
@click.argument("source", type=str)
@click.argument("target", type=str, required=False)
@click.pass_obj
def path(config: AnalysisConfig, text_file: Path, source: str, target: str | None):
    """Shortest path(s) from SOURCE to TARGET, or to every word.

    Path length is the summed co-occurrence weight, so frequent word pairs
    count as longer. Press Ctrl-C to stop early and keep partial results.
    """
    graph = _load_graph(text_file)
    target_word = normalize_word(target) if target else None

    with cancel_on_interrupt(CancellationToken()) as token:
        report = query_paths(graph, normalize_word(source), target_word, cancel=token)

    for line in format_path_report(report, config.path_separator):
        click.echo(line)


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
@click.option("--damping", "-d", type=float, default=None, help="Damping factor")
@click.option("--top", "-n", type=int, default=None, help="Only show the top N words")
@click.pass_obj
def pagerank(
    config: AnalysisConfig, text_file: Path, damping: float | None, top: int | None
):
    """Rank words with PageRank."""
    graph = _load_graph(text_file)
    try:
        result = compute_pagerank(
            graph,
            damping=config.damping if damping is None else damping,
            max_iterations=config.max_iterations,
            tolerance=config.tolerance,
        )
    except WordGraphError as exc:
        raise click.ClickException(str(exc)) from exc

    status = "converged" if result.converged else "did not converge"
    click.echo(f"PageRank {status} after {result.iterations} iterations")
    lines = format_pagerank(result, config.score_precision)
    for line in lines[:top] if top else lines:
        click.echo(line)


@cli.command()
@click.argument("text_file", type=TEXT_FILE)
@click.option(
    "--output", "-o", type=click.Path(path_type=Path), default=None, help="Walk file"
)
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--start", type=str, default=None, help="Start word instead of a random one")
@click.option(
    "--stop-on-enter",
    is_flag=True,
    help="Stop the walk when Enter is pressed (Ctrl-C always stops it)",
)
@click.pass_obj
def walk(
    config: AnalysisConfig,
    text_file: Path,
    output: Path | None,
    seed: int | None,
    start: str | None,
    stop_on_enter: bool,
):
    """Random walk until a dead end or a repeated edge; write it to a file."""
    graph = _load_graph(text_file)

    with cancel_on_interrupt(CancellationToken()) as token:
        if stop_on_enter:
            cancel_on_enter(token)
        try:
            trace = random_walk(
                graph,
                rng=random.Random(seed),
                cancel=token,
                start=normalize_word(start) if start else None,
            )
        except WordGraphError as exc:
            raise click.ClickException(str(exc)) from exc

    out = write_walk(trace, output or Path(config.walk_file), config.path_separator)
    click.echo(format_walk(trace, config.path_separator))
    click.echo(f"Walk ({trace.stop_reason.value}) written: {out}")


if __name__ == "__main__":
    cli()
