from pathlib import Path
from typing import Any, Dict, List, Tuple

import click

from springls.cli.utils import configure_logging, load_catalog_from_options, output_error, output_result
from springls.lsp.service import SpringConfigService
from springls.lsp.utils.dialect import detect_dialect


def validate_file(service: SpringConfigService, path: Path) -> Dict[str, Any]:
    """Validate a single configuration file and describe the outcome."""
    if detect_dialect(str(path)) is None:
        return {"path": str(path), "status": "skipped", "diagnostics": []}

    text = path.read_text(encoding="utf-8")
    diagnostics = service.validate(path.resolve().as_uri(), text)
    return {
        "path": str(path),
        "status": "error" if diagnostics else "ok",
        "diagnostics": [
            {
                "line": d.range.start.line + 1,
                "column": d.range.start.character + 1,
                "message": d.message,
            }
            for d in diagnostics
        ],
    }


def format_validation_results(results: List[Dict[str, Any]]) -> str:
    """Format validation results for human-readable output"""
    output = []
    for result in results:
        if result["status"] == "ok":
            output.append(f"  ✓ {result['path']}")
        elif result["status"] == "skipped":
            output.append(f"  - {result['path']} (not a Spring Boot configuration file)")
        else:
            output.append(f"  ✗ {result['path']}")
            for diagnostic in result["diagnostics"]:
                output.append(f"    {diagnostic['line']}:{diagnostic['column']} {diagnostic['message']}")

    failed = sum(1 for r in results if r["status"] == "error")
    output.append("")
    output.append(f"Checked {len(results)} files ({failed} with errors)")
    return "\n".join(output)


@click.command(name="validate")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--catalog", "catalog_paths", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Extra property catalog file (repeatable)")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(files: Tuple[Path, ...], catalog_paths: Tuple[str, ...], json_output: bool, debug: bool):
    """Check YAML configuration files for syntax errors.

    Exits with status 1 when any file has errors.

    \b
    Examples:
        springls validate application.yml
        springls validate src/main/resources/*.yml --json-output
    """
    configure_logging(debug)

    try:
        service = SpringConfigService(load_catalog_from_options(catalog_paths))
        results = [validate_file(service, path) for path in files]
        if json_output:
            output_result(results, json_output=True)
        else:
            click.echo(format_validation_results(results))
    except Exception as e:
        output_error(e, json_output, debug)

    if any(r["status"] == "error" for r in results):
        raise click.exceptions.Exit(1)
