"""
LSP server implementation for springls.

This package provides a Language Server Protocol implementation for Spring
Boot configuration files (``application.properties`` and
``application.yml``), offering property completion, hover documentation,
formatting and YAML syntax diagnostics.

Key Components:
- SpringLSPServer: pygls based server wiring the features together
- SpringConfigService: the request-level core (completion, hover, format, validate)
- Utility modules: indentation parsing, path resolution, suggestion filtering

Usage Example:
    from springls.config import load_catalog
    from springls.lsp import SpringLSPServer

    server = SpringLSPServer(catalog=load_catalog())

    # Start server (stdio mode for IDE integration)
    server.start()

    # Or start in TCP mode for testing
    server.start(use_tcp=True, host="localhost")
"""

from .server import SpringLSPServer, ServerInitializationState
from .service import SpringConfigService

from .features import (
    register_completion,
    register_diagnostics,
    register_formatting,
    register_hover,
)

__all__ = [
    "SpringLSPServer",
    "ServerInitializationState",
    "SpringConfigService",
    "register_completion",
    "register_diagnostics",
    "register_formatting",
    "register_hover",
]
