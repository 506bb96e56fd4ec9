import signal
from typing import Optional, Tuple

import click

from springls.cli.utils import configure_logging, load_catalog_from_options, output_error
from springls.lsp.server import DEFAULT_PORT, SpringLSPServer


@click.command(name="lsp")
@click.option("--catalog", "catalog_paths", multiple=True, type=click.Path(dir_okay=False),
              help="Extra property catalog file (repeatable)")
@click.option("--port", type=int, help=f"Port number for TCP mode (defaults to {DEFAULT_PORT})")
@click.option("--host", default="localhost", help="Host to bind to when using TCP mode (defaults to localhost)")
@click.option("--tcp", is_flag=True, help="Use TCP instead of stdio for LSP communication")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def lsp(catalog_paths: Tuple[str, ...], port: Optional[int], host: str, tcp: bool, debug: bool):
    """Start the language server.

    By default, the server uses stdio for communication (suitable for IDE integration).
    Use --tcp flag for testing or when stdio communication is not suitable.

    \b
    Examples:
        springls lsp                          # Start LSP server using stdio
        springls lsp --tcp                    # Start LSP server using TCP on localhost:2087
        springls lsp --tcp --port 4000        # Start LSP server using TCP on localhost:4000
        springls lsp --catalog my-props.yml   # Add project specific properties
        springls lsp --debug                  # Start with detailed debug logging
    """
    configure_logging(debug)

    try:
        catalog = load_catalog_from_options(catalog_paths)
        final_port = port or DEFAULT_PORT

        def signal_handler(signum, frame):
            raise KeyboardInterrupt()

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        server = SpringLSPServer(catalog=catalog, port=final_port)

        if tcp:
            click.echo(f"Starting springls on {host}:{final_port}", err=True)
            server.start(host=host, use_tcp=True)
        else:
            server.start(host=host, use_tcp=False)

    except KeyboardInterrupt:
        click.echo("\nLSP server stopped", err=True)
    except Exception as e:
        output_error(e, json_output=False, debug=debug)
