"""Region inspection CLI.

Commands:
- describe: Load a PD region payload and show the normalized descriptor
- encode: Wrap a key in the memcomparable bytes encoding
- decode: Unwrap a memcomparable key

Useful when chasing routing bugs: paste the JSON from
/pd/api/v1/region/id/{id} into a file and check which keys it owns.
"""

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tikv_region.codec import BytesCodec, format_bytes
from tikv_region.config import Settings
from tikv_region.errors import CodecError, RegionError
from tikv_region.factory import create_region
from tikv_region.models import KeyMode

app = typer.Typer(
    name="tikv-region",
    help="Inspect TiKV region descriptors",
    no_args_is_help=True,
)

console = Console()


def _parse_key(key: str, is_hex: bool) -> bytes:
    if not is_hex:
        return key.encode()
    try:
        return bytes.fromhex(key)
    except ValueError:
        console.print(f"[red]Not a hex string: {escape(key)}[/red]")
        raise typer.Exit(1)


@app.command("describe")
def describe(
    region_file: Path = typer.Argument(..., help="JSON file with a PD region payload"),
    mode: str = typer.Option(
        None, "--mode", "-m", envvar="TIKV_REGION_KV_MODE", help="Key mode (raw or txn)"
    ),
    keys: list[str] = typer.Option(
        [], "--key", "-k", help="Key to test for containment (repeatable)"
    ),
    is_hex: bool = typer.Option(False, "--hex", help="Treat --key values as hex"),
    leader_store: int = typer.Option(
        None, "--leader-store", help="Show the descriptor after moving the leader"
    ),
) -> None:
    """Show a region's normalized range, peers and key ownership."""
    if not region_file.exists():
        console.print(f"[red]File not found: {region_file}[/red]")
        raise typer.Exit(1)

    try:
        settings = Settings()
        if mode:
            settings = settings.model_copy(update={"kv_mode": KeyMode.parse(mode)})
        payload = json.loads(region_file.read_text())
        region = create_region(payload, settings=settings)
    except (json.JSONDecodeError, ValidationError, RegionError) as e:
        console.print(f"[red]Cannot build region: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{escape(str(region))}[/bold]")
    console.print(f"  Mode: {settings.kv_mode.value}")
    console.print(f"  Isolation: {region.isolation_level.name}")
    console.print(f"  Priority: {region.command_priority.name}")
    console.print()

    table = Table(title="Peers")
    table.add_column("Peer ID", justify="right", style="cyan")
    table.add_column("Store ID", justify="right")
    table.add_column("Leader", style="green")
    for peer in region.peers:
        table.add_row(
            str(peer.id), str(peer.store_id), "*" if peer == region.leader else ""
        )
    console.print(table)

    for key in keys:
        raw = _parse_key(key, is_hex)
        owned = region.contains(raw)
        style = "green" if owned else "yellow"
        verdict = "in range" if owned else "out of range"
        console.print(f"  {escape(format_bytes(raw))}: [{style}]{verdict}[/{style}]")

    if leader_store is not None:
        swapped = region.with_new_leader(leader_store)
        if swapped is region:
            console.print(f"[yellow]No peer on store {leader_store}[/yellow]")
        else:
            console.print(f"Leader moved: {escape(str(swapped))}")


@app.command("encode")
def encode(
    key: str = typer.Argument(..., help="Key to encode"),
    is_hex: bool = typer.Option(False, "--hex", help="Treat KEY as hex"),
) -> None:
    """Print the memcomparable encoding of KEY as hex."""
    console.print(BytesCodec().encode(_parse_key(key, is_hex)).hex().upper())


@app.command("decode")
def decode(data: str = typer.Argument(..., help="Hex-encoded memcomparable key")) -> None:
    """Print the decoded form of a memcomparable key as hex."""
    raw = _parse_key(data, True)
    try:
        value = BytesCodec().decode(raw)
    except CodecError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(value.hex().upper())


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
