"""Command-line interface for shadekit."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from shadekit.core.color.convert import ColorParseError, hex_to_rgb
from shadekit.core.color.ramp import find_ramp_inversions, generate_shades_from_hex
from shadekit.core.config.loader import configure_logging as configure_app_logging
from shadekit.core.config.loader import load_app_config, load_review_config
from shadekit.core.review.scoring import review_blocks
from shadekit.core.theming.applier import apply_theme_shades_to_blocks
from shadekit.core.theming.models import Block
from shadekit.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

_SEVERITY_STYLES = {"info": "cyan", "warn": "yellow", "error": "red"}


def load_blocks(path: Path) -> list[Block]:
    """Load blocks from a JSON file holding a list or ``{"blocks": [...]}``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON or block shape is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Blocks file not found: {path}")
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("blocks")
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of blocks in {path}")
    return [Block.model_validate(item) for item in raw]


def run_shades(args: argparse.Namespace) -> int:
    """Print the 11-step ramp for a base color."""
    try:
        shades = generate_shades_from_hex(args.hex)
    except ColorParseError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    if args.json:
        console.print_json(data=shades.model_dump())
        return 0
    if args.css:
        console.print(shades.to_css_variables(), markup=False, highlight=False)
        return 0

    base = hex_to_rgb(args.hex)
    table = Table(title=f"Shades for {args.hex}")
    table.add_column("Step", justify="right")
    table.add_column("Hex")
    table.add_column("Swatch")
    for step, color in shades.items():
        table.add_row(str(step), color, f"[on {color}]      [/]")
    console.print(table)
    console.print(f"Base RGB: {base.r}, {base.g}, {base.b}")

    inversions = find_ramp_inversions(shades)
    if inversions:
        pairs = ", ".join(f"{a}/{b}" for a, b in inversions)
        console.print(f"[yellow]Note: lightness order inverted at {pairs}[/yellow]")
    return 0


def run_theme(args: argparse.Namespace) -> int:
    """Recolor a blocks file with a ramp generated from a base color."""
    try:
        blocks = load_blocks(Path(args.blocks))
        shades = generate_shades_from_hex(args.hex)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    themed = [block.to_dict() for block in apply_theme_shades_to_blocks(blocks, shades)]

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(json.dumps(themed, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"[green]Themed {len(themed)} blocks:[/green] {out_path}")
    else:
        console.print_json(data=themed)
    return 0


def run_review(args: argparse.Namespace) -> int:
    """Review a blocks file and print the score and issues."""
    try:
        blocks = load_blocks(Path(args.blocks))
        config = load_review_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        # ValidationError is a ValueError
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    result = review_blocks(blocks, config)

    if args.json:
        console.print_json(data=result.to_dict())
        return 0

    console.print(f"[bold]Score:[/bold] {result.score}")
    if not result.issues:
        console.print("[green]No issues found[/green]")
        return 0

    table = Table(title=f"{len(result.issues)} issues")
    table.add_column("Block", justify="right")
    table.add_column("Field")
    table.add_column("Severity")
    table.add_column("Message")
    for issue in result.issues:
        style = _SEVERITY_STYLES.get(issue.severity.value, "white")
        table.add_row(
            str(issue.target.block_index),
            issue.target.field or "",
            f"[{style}]{issue.severity.value}[/{style}]",
            issue.message,
        )
    console.print(table)
    return 0


def run_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from shadekit.core.api.http.app import create_app

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    configure_app_logging(config)
    host = args.host or config.server.host
    port = args.port or config.server.port
    console.print(f"[bold]Serving shadekit on[/bold] http://{host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="shadekit",
        description="shadekit - color theming and content review for landing pages",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for one-shot commands (default: WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    shades = sub.add_parser("shades", help="Generate an 11-step shade ramp")
    shades.add_argument("hex", help="Base color, e.g. '#DC2626'")
    output = shades.add_mutually_exclusive_group()
    output.add_argument("--css", action="store_true", help="Print CSS custom properties")
    output.add_argument("--json", action="store_true", help="Print JSON")

    theme = sub.add_parser("theme", help="Apply a base color to a blocks file")
    theme.add_argument("--hex", required=True, help="Base color")
    theme.add_argument("--blocks", required=True, help="Path to blocks JSON")
    theme.add_argument("--out", help="Write themed blocks here (default: stdout)")

    review = sub.add_parser("review", help="Review a blocks file")
    review.add_argument("--blocks", required=True, help="Path to blocks JSON")
    review.add_argument("--config", help="Review config (.json, .yaml, or .yml)")
    review.add_argument("--json", action="store_true", help="Print JSON")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Bind address (default: from config)")
    serve.add_argument("--port", type=int, help="Bind port (default: from config)")
    serve.add_argument("--config", help="App config (default: shadekit.yaml if present)")

    return p


_COMMANDS = {
    "shades": run_shades,
    "theme": run_theme,
    "review": run_review,
    "serve": run_serve,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd != "serve":
        configure_logging(level=args.log_level)

    sys.exit(_COMMANDS[args.cmd](args))


if __name__ == "__main__":
    main()
