from pathlib import Path
from typing import Tuple

import click

from springls.cli.utils import configure_logging, load_catalog_from_options, output_error
from springls.lsp.service import SpringConfigService


@click.command(name="format")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--catalog", "catalog_paths", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Extra property catalog file (repeatable)")
@click.option("--write", is_flag=True, help="Rewrite files in place instead of printing them")
@click.option("--check", is_flag=True, help="Only report files that would change (exit 1 if any)")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def format_files(files: Tuple[Path, ...], catalog_paths: Tuple[str, ...], write: bool, check: bool, debug: bool):
    """Format .properties and YAML configuration files.

    YAML files that do not parse are left untouched.

    \b
    Examples:
        springls format application.yml             # Print formatted output
        springls format --write application.yml     # Format in place
        springls format --check src/main/resources/*.properties
    """
    configure_logging(debug)

    changed = []
    try:
        service = SpringConfigService(load_catalog_from_options(catalog_paths))
        for path in files:
            text = path.read_text(encoding="utf-8")
            formatted = service.format(path.resolve().as_uri(), text)
            if formatted is None:
                click.echo(f"Skipped {path} (unsupported or not parseable)", err=True)
                continue
            if formatted == text:
                continue

            changed.append(path)
            if check:
                click.echo(f"Would reformat {path}")
            elif write:
                path.write_text(formatted, encoding="utf-8")
                click.echo(f"Reformatted {path}")
            else:
                click.echo(formatted, nl=False)
    except Exception as e:
        output_error(e, json_output=False, debug=debug)

    if check and changed:
        raise click.exceptions.Exit(1)
