"""Command-line interface for Holocron."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from holocron import __version__

console = Console()
logger = logging.getLogger("holocron")


def _setup_logging(verbose: bool) -> None:
    from holocron.config import get_settings

    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # Driver chatter stays out of progress output
    logging.getLogger("neo4j").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """Holocron - seed canonical Star Wars lore into MongoDB and Neo4j."""
    _setup_logging(verbose)


@main.command()
def status() -> None:
    """Check system status (MongoDB, Neo4j and Weaviate connections)."""
    from holocron.config import get_settings
    from holocron.documents import check_mongo_connection
    from holocron.graph import check_neo4j_connection
    from holocron.semantic import SemanticIndexWriter

    console.print("[bold]Holocron Status[/bold]\n")

    settings = get_settings()
    console.print(f"MongoDB database: {settings.mongodb_database}")
    console.print(f"Neo4j URI: {settings.neo4j_uri}")
    console.print(f"Weaviate URL: {settings.weaviate_url}\n")

    def check_weaviate() -> bool:
        with SemanticIndexWriter() as index:
            return index.is_ready()

    checks = [
        ("MongoDB", check_mongo_connection),
        ("Neo4j", check_neo4j_connection),
        ("Weaviate", check_weaviate),
    ]
    for name, check in checks:
        if check():
            console.print(f"[green]OK[/green] {name} connected")
        else:
            console.print(f"[red]FAIL[/red] {name} not reachable")


# ============================================================================
# Load Commands
# ============================================================================


def _print_load_report(report) -> None:
    table = Table(title=f"Load Results ({report.catalog})")
    table.add_column("Collection", style="cyan")
    table.add_column("Attempted", justify="right")
    table.add_column("Loaded", style="green", justify="right")
    table.add_column("Doc skips", style="yellow", justify="right")
    table.add_column("Node skips", style="yellow", justify="right")

    for result in report.collections:
        table.add_row(
            result.collection,
            f"{result.attempted:,}",
            f"{result.loaded:,}",
            f"{result.documents_skipped:,}",
            f"{result.nodes_skipped:,}",
        )

    console.print(table)


def _print_reconcile_report(report, show_unmatched: int = 10) -> None:
    table = Table(title="Inferred Relationships")
    table.add_column("Step", style="cyan")
    table.add_column("Type")
    table.add_column("Matched", justify="right")
    table.add_column("New", style="green", justify="right")
    table.add_column("Unmatched", style="yellow", justify="right")

    for step in report.steps:
        if step.ok:
            table.add_row(
                step.name,
                step.relationship,
                f"{step.matched:,}",
                f"{step.created:,}",
                f"{len(step.unmatched):,}",
            )
        else:
            table.add_row(step.name, step.relationship, "[red]failed[/red]", "-", "-")

    console.print(table)

    for step in report.steps:
        if step.error:
            console.print(f"[red]{step.error}[/red]")
        if step.unmatched and show_unmatched:
            console.print(f"\n[bold]{step.name}: no matching node for[/bold]")
            for miss in step.unmatched[:show_unmatched]:
                hint = f" [dim](did you mean {miss.suggestion!r}?)[/dim]" if miss.suggestion else ""
                console.print(f"  {miss.source} -> {miss.value!r}{hint}")
            if len(step.unmatched) > show_unmatched:
                console.print(f"  [dim]... {len(step.unmatched) - show_unmatched} more[/dim]")


def _print_validation_report(report) -> None:
    table = Table(title="Validation")
    table.add_column("Collection", style="cyan")
    table.add_column("Expected", justify="right")
    table.add_column("Documents", justify="right")
    table.add_column("Nodes", justify="right")
    table.add_column("Canonical (doc/node)", justify="right")
    table.add_column("Result")

    for check in report.checks:
        canonical = f"{check.canonical_documents}/{check.canonical_nodes}"
        if check.baseline is not None:
            canonical += f" (baseline {check.baseline})"
        table.add_row(
            check.collection,
            f">= {check.expected:,}",
            f"{check.documents:,}",
            f"{check.nodes:,}",
            canonical,
            "[green]pass[/green]" if check.passed else "[red]FAIL[/red]",
        )

    console.print(table)

    if report.passed:
        console.print("\n[bold green]PASS[/bold green] all targets met\n")
    else:
        console.print("\n[bold red]FAIL[/bold red] validation found discrepancies:")
        for issue in report.problems():
            console.print(f"  - {issue}")


def _run_catalog(catalog, dry_run: bool) -> None:
    """Run a seeding job and exit non-zero unless it validates."""
    from holocron.config import get_settings
    from holocron.errors import HolocronError
    from holocron.jobs import open_stores, run_seed_job

    mode = "[yellow](dry run, in-memory stores)[/yellow]" if dry_run else ""
    console.print(f"[bold]Seeding:[/bold] {catalog.name} {mode}")
    console.print(f"[dim]{catalog.total_records:,} records, source: {catalog.source}[/dim]\n")

    try:
        with open_stores(dry_run=dry_run) as (documents, graph):
            outcome = run_seed_job(catalog, documents, graph, verified=get_settings().verified)
    except HolocronError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except Exception as e:
        logger.exception("Seeding %s aborted", catalog.name)
        console.print(f"[red]Seeding aborted: {e}[/red]")
        sys.exit(1)

    console.print()
    _print_load_report(outcome.load)
    _print_reconcile_report(outcome.reconcile)
    _print_validation_report(outcome.validation)

    if not outcome.passed:
        sys.exit(1)


@main.group()
def load() -> None:
    """Seed the document and graph stores."""
    pass


@load.command(name="canon")
@click.option("--dry-run", is_flag=True, help="Run against in-memory stores")
def load_canon(dry_run: bool) -> None:
    """Load the canonical Original Trilogy characters, locations and factions."""
    from holocron.catalog import canon_catalog

    _run_catalog(canon_catalog(), dry_run)


@load.command(name="expanded")
@click.option("--dry-run", is_flag=True, help="Run against in-memory stores")
def load_expanded(dry_run: bool) -> None:
    """Add supplementary encyclopedia entries without touching canonical ones."""
    from holocron.catalog import expanded_catalog

    _run_catalog(expanded_catalog(), dry_run)


@load.command(name="timeline")
@click.option("--dry-run", is_flag=True, help="Run against in-memory stores")
def load_timeline(dry_run: bool) -> None:
    """Load timeline events and eras."""
    from holocron.catalog import timeline_catalog

    _run_catalog(timeline_catalog(), dry_run)


@load.command(name="politics")
@click.option("--dry-run", is_flag=True, help="Run against in-memory stores")
def load_politics(dry_run: bool) -> None:
    """Load alliance groups and faction relationships (after canon)."""
    from holocron.catalog import politics_catalog

    _run_catalog(politics_catalog(), dry_run)


@load.command(name="file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Run against in-memory stores")
def load_file(path: str, dry_run: bool) -> None:
    """Load a JSON catalog file."""
    from holocron.catalog import CatalogFileError, load_catalog_file
    from holocron.rules import DEFAULT_RULES

    try:
        catalog = load_catalog_file(Path(path), rules=DEFAULT_RULES)
    except CatalogFileError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    _run_catalog(catalog, dry_run)


@main.command()
def lore() -> None:
    """Seed the semantic index with world knowledge entries."""
    import httpx

    from holocron.catalog import WORLD_KNOWLEDGE
    from holocron.semantic import KNOWLEDGE_CLASS, SemanticIndexWriter, load_knowledge

    console.print(f"[bold]Seeding semantic index:[/bold] {len(WORLD_KNOWLEDGE)} {KNOWLEDGE_CLASS} entries\n")

    with SemanticIndexWriter() as index:
        if not index.is_ready():
            console.print("[red]Cannot connect to Weaviate[/red]")
            sys.exit(1)
        try:
            result = load_knowledge(WORLD_KNOWLEDGE, index)
        except httpx.HTTPError as e:
            console.print(f"[red]Semantic index load aborted: {e}[/red]")
            sys.exit(1)

    console.print(f"[green]OK[/green] {result.created}/{result.attempted} entries created")
    if result.skipped:
        console.print(f"[dim]{len(result.skipped)} already present[/dim]")


# ============================================================================
# Maintenance Commands
# ============================================================================


def _catalog_option(func):
    return click.option(
        "--catalog",
        "-c",
        "catalog_name",
        type=click.Choice(["canon", "expanded", "timeline", "politics"]),
        default="canon",
        show_default=True,
        help="Catalog whose collections and targets to use",
    )(func)


@main.command()
def reconcile() -> None:
    """Re-run relationship inference and declared links against the graph store."""
    from holocron.catalog import CATALOGS
    from holocron.errors import StoreConnectionError
    from holocron.graph import Neo4jGraphStore, connect_neo4j
    from holocron.pipeline import RelationshipReconciler
    from holocron.rules import DEFAULT_RULES

    try:
        driver = connect_neo4j()
    except StoreConnectionError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    graph = Neo4jGraphStore(driver)
    try:
        links = [link for build in CATALOGS.values() for link in build().links]
        report = RelationshipReconciler(graph).reconcile(DEFAULT_RULES, links)
    finally:
        graph.close()

    _print_reconcile_report(report, show_unmatched=25)
    if report.failed:
        sys.exit(1)


@main.command()
@_catalog_option
def validate(catalog_name: str) -> None:
    """Check both stores against a catalog's minimum counts."""
    from holocron.catalog import get_catalog
    from holocron.errors import HolocronError
    from holocron.jobs import open_stores
    from holocron.pipeline import Validator

    catalog = get_catalog(catalog_name)

    try:
        with open_stores() as (documents, graph):
            report = Validator(documents, graph).validate(catalog.targets)
    except HolocronError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    _print_validation_report(report)
    if not report.passed:
        sys.exit(1)


@main.command()
@_catalog_option
def sweep(catalog_name: str) -> None:
    """Compare natural keys across stores and audit duplicates."""
    from holocron.catalog import get_catalog
    from holocron.errors import HolocronError
    from holocron.jobs import open_stores
    from holocron.pipeline import ConsistencySweep

    catalog = get_catalog(catalog_name)

    try:
        with open_stores() as (documents, graph):
            diffs, findings = ConsistencySweep(documents, graph).sweep(catalog.collections)
    except HolocronError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    table = Table(title="Cross-store Consistency")
    table.add_column("Collection", style="cyan")
    table.add_column("Missing in graph", justify="right")
    table.add_column("Missing in documents", justify="right")
    for diff in diffs:
        table.add_row(diff.collection, str(len(diff.missing_in_graph)), str(len(diff.missing_in_documents)))
    console.print(table)

    for diff in diffs:
        for key in diff.missing_in_graph:
            console.print(f"  [yellow]{diff.collection}[/yellow] {key!r} has no {diff.label} node")
        for key in diff.missing_in_documents:
            console.print(f"  [yellow]{diff.label}[/yellow] {key!r} has no {diff.collection} document")

    console.print("\n[bold]Data quality:[/bold]")
    for finding in findings:
        if finding.healthy:
            console.print(f"  [green]OK[/green] {finding.store}/{finding.name}: {finding.total:,} records")
            continue
        console.print(
            f"  [yellow]!![/yellow] {finding.store}/{finding.name}: "
            f"{len(finding.duplicates)} duplicate groups, {finding.empty_keys} empty keys"
        )
        for key, copies in finding.duplicates.items():
            console.print(f"      {key!r}: {copies} copies")

    healthy = all(d.consistent for d in diffs) and all(f.healthy for f in findings)
    if not healthy:
        sys.exit(1)


@main.group()
def graph() -> None:
    """Graph database commands."""
    pass


@graph.command(name="stats")
def graph_stats() -> None:
    """Show graph statistics."""
    from holocron.errors import StoreConnectionError
    from holocron.graph import Neo4jGraphStore, connect_neo4j

    try:
        driver = connect_neo4j()
    except StoreConnectionError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    store = Neo4jGraphStore(driver)
    try:
        console.print("[bold]Node counts:[/bold]")
        total = 0
        for label, count in store.label_counts():
            total += count
            console.print(f"  {label}: {count:,}")

        console.print(f"\n[bold]Total nodes:[/bold] {total:,}")
        console.print(f"[bold]Total relationships:[/bold] {store.count_relationships():,}")
    finally:
        store.close()


if __name__ == "__main__":
    main()
