"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from ansi_textmode.errors import TextmodeError


def _parse_size(value: str) -> tuple[int, int]:
    try:
        columns, rows = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise typer.BadParameter(f"expected COLUMNSxROWS, got {value!r}")
    if columns < 1 or rows < 1:
        raise typer.BadParameter("size must be positive")
    return columns, rows


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-textmode",
        help="Inspect, pack and transform text-mode art files.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Art file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show SAUCE metadata for a file."""
        from ansi_textmode.io import read_file

        try:
            sauce = read_file(path).sauce
        except TextmodeError as e:
            console.print(f"[red]{path.name}: {e}[/]")
            raise typer.Exit(1)

        if not sauce:
            console.print(f"[yellow]No SAUCE metadata found in {path}[/]")
            raise typer.Exit(1)

        if json_output:
            data = {
                "title": sauce.title,
                "author": sauce.author,
                "group": sauce.group,
                "date": sauce.date,
                "columns": sauce.columns,
                "rows": sauce.rows,
                "filesize": sauce.filesize,
                "data_type": sauce.data_type.name,
                "ice_colors": sauce.ice_colors,
                "use_9px_font": sauce.use_9px_font,
                "font_name": sauce.font_name,
                "comments": sauce.comments,
            }
            print(json.dumps(data, indent=2))
        else:
            console.print(f"[bold cyan]SAUCE Metadata for {path.name}[/]")
            console.print(f"  [bold]Title:[/]  {sauce.title or '(none)'}")
            console.print(f"  [bold]Author:[/] {sauce.author or '(none)'}")
            console.print(f"  [bold]Group:[/]  {sauce.group or '(none)'}")
            if sauce.date:
                console.print(f"  [bold]Date:[/]   {sauce.date}")
            console.print(f"  [bold]Size:[/]   {sauce.columns}x{sauce.rows}")
            console.print(f"  [bold]Font:[/]   {sauce.font_name}")
            if sauce.ice_colors:
                console.print("  [bold]iCE colors[/]")
            if sauce.comments:
                console.print("  [bold]Comments:[/]")
                for comment in sauce.comments:
                    console.print(f"    {comment}")

    @app.command()
    def pack(
        source: Annotated[Path, typer.Argument(help="Source BinaryText (.bin) file")],
        dest: Annotated[Path, typer.Argument(help="Destination JSON file")],
        columns: Annotated[Optional[int], typer.Option("--columns", "-c", help="Width when the file has no SAUCE")] = None,
    ) -> None:
        """Compress a BinaryText file into a JSON transfer document."""
        from ansi_textmode.codec import compress
        from ansi_textmode.io import load_bin

        try:
            doc = load_bin(source, columns=columns)
        except TextmodeError as e:
            console.print(f"[red]{source.name}: {e}[/]")
            raise typer.Exit(1)

        compressed = compress(doc)
        dest.write_text(json.dumps(compressed.to_dict()))
        runs = len(compressed.compressed_data.code)
        console.print(
            f"[green]Packed {source} → {dest}[/] "
            f"({doc.columns}x{doc.rows}, {runs} glyph runs)"
        )

    @app.command()
    def transform(
        source: Annotated[Path, typer.Argument(help="Source BinaryText (.bin) file")],
        dest: Annotated[Path, typer.Argument(help="Destination .bin file")],
        flip_x: Annotated[bool, typer.Option("--flip-x", help="Mirror left to right")] = False,
        flip_y: Annotated[bool, typer.Option("--flip-y", help="Mirror top to bottom")] = False,
        rotate: Annotated[bool, typer.Option("--rotate", help="Quarter turn clockwise")] = False,
        size: Annotated[Optional[str], typer.Option("--resize", help="New size as COLUMNSxROWS")] = None,
        columns: Annotated[Optional[int], typer.Option("--columns", "-c", help="Width when the file has no SAUCE")] = None,
    ) -> None:
        """Resize, flip or rotate a BinaryText file."""
        from ansi_textmode import transform as tf
        from ansi_textmode.io import load_bin, save_bin

        if not (flip_x or flip_y or rotate or size):
            console.print("[yellow]Nothing to do: pass --flip-x, --flip-y, --rotate or --resize[/]")
            raise typer.Exit(1)
        new_size = _parse_size(size) if size else None

        try:
            doc = load_bin(source, columns=columns)
        except TextmodeError as e:
            console.print(f"[red]{source.name}: {e}[/]")
            raise typer.Exit(1)

        if new_size:
            doc = tf.resize(doc, *new_size)
        if flip_x:
            doc = tf.flip_x(doc)
        if flip_y:
            doc = tf.flip_y(doc)
        if rotate:
            doc = tf.rotate(doc)

        save_bin(doc, dest)
        console.print(f"[green]Wrote {dest}[/] ({doc.columns}x{doc.rows})")

    return app
