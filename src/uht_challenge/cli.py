"""Command-line interface for the UHT trait challenge."""

from typing import List, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from uht_challenge.catalog import get_entity_catalog, get_trait_catalog
from uht_challenge.config import get_settings
from uht_challenge.engine import (
    LAYER_ORDER,
    ChallengeSession,
    ScoreResult,
    decode_selection,
    encode_selection,
    layer_of,
    traits_in_layer,
)
from uht_challenge.errors import ChallengeError
from uht_challenge.utils.logging import console, get_logger, setup_logging

app = typer.Typer(
    name="uht-challenge",
    help="Guess which Universal Hex Taxonomy traits apply to an entity",
    add_completion=False,
)

logger = get_logger(__name__)

PLAY_HELP = (
    "Enter trait numbers (e.g. '1 5 12') to toggle them, "
    "'hint' for layer counts, 'submit' to score, 'next' for a new entity, 'quit' to exit."
)


def init_app():
    """Initialize the application."""
    settings = get_settings()
    setup_logging(settings.log_level)


def _load_catalogs():
    try:
        return get_trait_catalog(), get_entity_catalog()
    except ChallengeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _render_board(session: ChallengeSession, hints: Optional[dict] = None) -> None:
    entity = session.current_entity
    selected = session.selected_traits
    number = 1

    console.print(
        Panel(
            f"[bold]{entity.name}[/bold]\n"
            f"[dim]Image: {entity.image}[/dim]\n"
            f"Traits required: {len(entity.traits)}   "
            f"Selected: {len(selected)}   Hex: {session.hex_code}",
            title="Challenge",
        )
    )

    for layer in LAYER_ORDER:
        title = f"{layer.value} Layer"
        if hints is not None:
            title += f" (needs {hints[layer]})"

        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Trait")

        for trait in traits_in_layer(session.trait_catalog, layer):
            mark = "[green]✔[/green] " if trait.name in selected else "  "
            table.add_row(str(number), f"{mark}{trait.name}")
            number += 1

        console.print(table)


def _render_result(result: ScoreResult) -> None:
    table = Table(title=f"Results for {result.entity_name}")
    table.add_column("Correct", style="green")
    table.add_column("Missed", style="red")
    table.add_column("Extras", style="yellow")

    columns = [result.correct_matches, result.missed_traits, result.extra_traits]
    rows = max(len(c) for c in columns) or 1
    for i in range(rows):
        table.add_row(*[(c[i] if i < len(c) else ("None" if i == 0 else "")) for c in columns])

    console.print(table)

    for name, text in result.feedback.items():
        console.print(f"  [bold]{name}:[/bold] {text}")

    hint_note = " (hint penalty applied)" if result.hint_used else ""
    console.print(f"\n[bold]Score: {result.score}/100[/bold]{hint_note}   Hex: {result.hex_code}")


# ============================================================================
# Game Commands
# ============================================================================


@app.command("play")
def play(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for entity draws"),
):
    """Play the trait challenge interactively."""
    init_app()

    trait_catalog, entity_catalog = _load_catalogs()
    if seed is None:
        seed = get_settings().random_seed

    session = ChallengeSession(entity_catalog, trait_catalog, seed=seed)
    names = trait_catalog.get_names()

    try:
        session.start()
    except ChallengeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[dim]{PLAY_HELP}[/dim]")
    hints = None
    _render_board(session)

    while True:
        try:
            command = console.input("\n[bold cyan]>[/bold cyan] ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            break

        if not command:
            continue

        if command in ("quit", "exit"):
            break

        if command == "hint":
            hints = session.request_hint()
        elif command == "submit":
            _render_result(session.score())
            continue
        elif command == "next":
            session.start()
            hints = None
        else:
            for token in command.replace(",", " ").split():
                if not token.isdigit() or not 1 <= int(token) <= len(names):
                    console.print(f"[yellow]Unknown trait number: {token}[/yellow]")
                    continue
                session.toggle_trait(names[int(token) - 1])

        _render_board(session, hints)

    console.print("\n[dim]Challenge ended.[/dim]")


# ============================================================================
# Catalog Commands
# ============================================================================


@app.command("list-traits")
def list_traits():
    """List all traits with their layer."""
    init_app()

    trait_catalog, _ = _load_catalogs()

    table = Table(title="Traits")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Layer")
    table.add_column("Name", style="cyan")

    for index, trait in enumerate(trait_catalog):
        table.add_row(str(index + 1), layer_of(index).value, trait.name)

    console.print(table)


@app.command("list-entities")
def list_entities():
    """List all entities with their trait count and hex code."""
    init_app()

    trait_catalog, entity_catalog = _load_catalogs()

    if len(entity_catalog) == 0:
        console.print("[yellow]No entities found.[/yellow]")
        return

    table = Table(title="Entities")
    table.add_column("Name", style="cyan")
    table.add_column("Traits", justify="right")
    table.add_column("Hex")

    for entity in entity_catalog:
        table.add_row(
            entity.name,
            str(len(entity.traits)),
            encode_selection(entity.traits, trait_catalog),
        )

    console.print(table)


# ============================================================================
# Utility Commands
# ============================================================================


@app.command("encode")
def encode(
    traits: List[str] = typer.Argument(..., help="Trait names to encode"),
):
    """Encode a set of trait names as a hex code."""
    init_app()

    trait_catalog, _ = _load_catalogs()

    unknown = [t for t in traits if t not in trait_catalog]
    if unknown:
        console.print(f"[yellow]Ignoring unknown traits: {', '.join(unknown)}[/yellow]")

    console.print(encode_selection(set(traits), trait_catalog))


@app.command("decode")
def decode(
    code: str = typer.Argument(..., help="Hex code to decode"),
):
    """Decode a hex code into trait names."""
    init_app()

    trait_catalog, _ = _load_catalogs()

    try:
        selected = decode_selection(code, trait_catalog)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not selected:
        console.print("[yellow]No traits set.[/yellow]")
        return

    for name in trait_catalog.get_names():
        if name in selected:
            console.print(f"  • {name}")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
