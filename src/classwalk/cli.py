"""Command-line interface for classwalk."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from classwalk import __version__
from classwalk.exceptions import ClasswalkError
from classwalk.exceptions import InvalidPathError
from classwalk.files import ClassFileVisitor
from classwalk.files import PathVisitor

app = typer.Typer(help="List class files under a package root by qualified name")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"classwalk {__version__}")
        raise typer.Exit()


@app.command()
def scan(
    root: Annotated[Path, typer.Argument(help="Directory of the package")],
    package: Annotated[
        str, typer.Argument(help="Dotted package name, e.g. com.example.pkg")
    ],
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log traversal details")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Print the qualified name of every class file under ROOT."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        visitor = PathVisitor(root, package, ClassFileVisitor())
        entries = visitor.walk()
    except InvalidPathError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except ClasswalkError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    for entry in entries:
        typer.echo(entry.qualified_name)

    count = len(entries)
    typer.secho(
        f"✓ Found {count} class{'es' if count != 1 else ''} in {package}",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )


def main() -> None:
    """Main entry point for the classwalk CLI."""
    app()


if __name__ == "__main__":
    main()
