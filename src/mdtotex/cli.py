import logging
from pathlib import Path

import typer

from mdtotex.parsing.converter import convert

app = typer.Typer(help="Markdown to LaTeX body converter")


@app.command()
def main(
    filename: Path = typer.Option(..., "--filename", "-f", help="Markdown file to parse")
):
    """
    Parse a markdown file and write a minimally styled LaTeX body to standard out.
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        stream = open(filename, "rb")
    except OSError as e:
        typer.echo(f"Error: Cannot open {filename}: {e.strerror}", err=True)
        raise typer.Exit(code=1)

    # Raw byte lines; decoding happens per line so one bad line costs only itself
    with stream:
        for fragment in convert(stream):
            typer.echo(fragment, nl=False)


if __name__ == "__main__":
    app()
