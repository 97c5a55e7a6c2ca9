"""CLI entry point for pagelens."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import load_config

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """pagelens - Summarize, group and cross-link harvested web pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def _get_processor(ctx):
    from .processor import ContentProcessor

    return ContentProcessor(load_config(ctx.obj.get("config_path")))


def _load(path):
    from .ingest import load_documents

    return load_documents(path)


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def summarize(ctx, path):
    """Summarize each document in PATH."""
    try:
        processor = _get_processor(ctx)
        summaries = [(doc, processor.summarize(doc)) for doc in _load(path)]
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    if not summaries:
        console.print("[yellow]No documents found.[/]")
        return

    for doc, summary in summaries:
        console.print(f"\n[bold cyan]{doc.title or doc.id}[/] [dim]({summary.reading_time_minutes} min read)[/]")
        console.print(f"  {summary.summary_text}")
        for point in summary.key_points:
            console.print(f"  • {point}")


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def keywords(ctx, path):
    """Show keywords for each document in PATH."""
    try:
        processor = _get_processor(ctx)
        rows = [(doc, processor.keywords(doc)) for doc in _load(path)]
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    table = Table(title="Keywords")
    table.add_column("Document", style="cyan")
    table.add_column("Keywords")
    for doc, words in rows:
        table.add_row(str(doc.title or doc.id), ", ".join(words))
    console.print(table)


@cli.command()
@click.argument("query")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def similar(ctx, query, path):
    """Find documents in PATH similar to QUERY."""
    try:
        processor = _get_processor(ctx)
        matches = processor.find_similar(query, _load(path))
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    if not matches:
        console.print("[yellow]No similar documents found.[/]")
        return

    table = Table(title=f"Similar to '{query}'")
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Preview", max_width=60)
    for i, (doc, score) in enumerate(matches, 1):
        table.add_row(str(i), str(doc.title or doc.id), f"{score:.3f}", doc.text[:80].replace("\n", " "))
    console.print(table)


def _print_groups(groups, title):
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Members")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Quality", justify="right")
    table.add_column("Description", max_width=50)
    for g in groups:
        table.add_row(
            g.name,
            ", ".join(str(m) for m in g.member_ids),
            f"{g.similarity_score:.3f}",
            f"{g.quality_score:.3f}",
            g.description,
        )
    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--method", "-m", default="combined",
              type=click.Choice(["content", "domain", "topic", "combined"]), help="Grouping method")
@click.pass_context
def group(ctx, path, method):
    """Suggest groups for the documents in PATH."""
    try:
        processor = _get_processor(ctx)
        groups = processor.suggest_groups(_load(path), method)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    if not groups:
        console.print("[yellow]No groups found.[/]")
        return

    console.print(f"[green]✓ Found {len(groups)} group(s)[/]")
    _print_groups(groups, f"Groups by {method}")


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--num", "-k", "num_clusters", default=None, type=int, help="Target cluster count (0 = auto)")
@click.pass_context
def clusters(ctx, path, num_clusters):
    """Run hierarchical clustering on the documents in PATH."""
    try:
        processor = _get_processor(ctx)
        found = processor.clusters(_load(path), num_clusters)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    if not found:
        console.print("[yellow]No clusters found. Need more related documents.[/]")
        return

    console.print(f"[green]✓ Found {len(found)} cluster(s)[/]")
    _print_groups(found, "Clusters")


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def recommend(ctx, path):
    """Cross-recommend related documents in PATH."""
    try:
        processor = _get_processor(ctx)
        recs = processor.recommendations(_load(path))
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return

    if not recs:
        console.print("[yellow]No recommendations above the relevance threshold.[/]")
        return

    console.print(f"[green]✓ Found {len(recs)} recommendation(s)[/]")
    for r in recs:
        console.print(f"  {r.source_id} ↔ {r.target_id} (score: {r.relevance_score:.3f}) [dim]{r.reason}[/]")


if __name__ == "__main__":
    cli()
