"""CLI entry point for apidoc."""

import logging
from pathlib import Path

import click

from apidoc.parser.base import Document
from apidoc.parser.blocks import read_blocks
from apidoc.parser.errors import ScanError
from apidoc.parser.scanner import scan
from apidoc.render import DEFAULT_FORMAT, FORMATS, render_documents


def _scan_file(file_path: Path, raw: bool, start_line: int) -> list[Document]:
    """Scan every annotated block in a file, or the whole file when raw."""
    if raw:
        return [scan(file_path.read_bytes(), line=start_line, file=str(file_path))]

    return [scan(block.text, line=block.line, file=block.file) for block in read_blocks(file_path)]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every tag as it is scanned.")
def main(verbose: bool):
    """Extract API documentation from annotated source comments."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command("scan")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file; stdout when omitted.")
@click.option("--format", "fmt", default=DEFAULT_FORMAT, envvar="APIDOC_FORMAT", type=click.Choice(FORMATS), help="Output format.")
@click.option("--raw", is_flag=True, help="Treat the whole file as one comment block.")
@click.option("--start-line", default=1, type=int, help="Line number of the first line, used with --raw.")
def scan_cmd(source: Path, output: Path | None, fmt: str, raw: bool, start_line: int):
    """Scan SOURCE and print the extracted API documents."""
    try:
        documents = _scan_file(source, raw, start_line)
    except ScanError as e:
        raise click.ClickException(str(e)) from e

    result = render_documents(documents, fmt)
    if output is None:
        click.echo(result, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Wrote {len(documents)} documents to {output}", err=True)
