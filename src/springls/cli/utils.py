import json
import logging
import os
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import click

from springls.config.catalog import PropertyCatalog, load_catalog


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def get_env_catalog_paths() -> List[Path]:
    """Get extra catalog files from the SPRINGLS_CATALOG environment variable.

    Multiple files are separated with os.pathsep.
    """
    value = os.environ.get("SPRINGLS_CATALOG", "")
    return [Path(part) for part in value.split(os.pathsep) if part.strip()]


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Logs always go to stderr so they never interleave with LSP traffic on stdout.

    Args:
        debug: Whether to enable debug logging
    """
    if not debug:
        debug = get_env_flag("SPRINGLS_DEBUG")

    log_level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for logger_name in logging.root.manager.loggerDict:
        logger = logging.getLogger(logger_name)
        logger.setLevel(log_level)
        logger.propagate = True


def load_catalog_from_options(catalog_paths: Optional[Sequence[str]] = None) -> PropertyCatalog:
    """Build the catalog from the bundled data, SPRINGLS_CATALOG and --catalog options."""
    extra = get_env_catalog_paths() + [Path(p) for p in (catalog_paths or [])]
    return load_catalog(extra)


def format_error(error: Exception, debug: bool = False) -> Dict[str, Any]:
    """Format an error for output.

    Args:
        error: The exception that occurred
        debug: Whether to include debug information

    Returns:
        Dict containing error information
    """
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any, json_output: bool = False) -> None:
    """Output a result in either JSON or human-readable format."""
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    elif isinstance(result, list):
        for row in result:
            click.echo(row)
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format, then abort.

    Args:
        error: The exception that occurred
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()
