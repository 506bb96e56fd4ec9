import logging
from typing import Optional

from pygls.server import LanguageServer
from lsprotocol.types import InitializedParams

from springls import __version__
from springls.config.catalog import PropertyCatalog

from .features.completion import register_completion
from .features.diagnostics import register_diagnostics
from .features.formatting import register_formatting
from .features.hover import register_hover
from .service import SpringConfigService
from .utils.document_event_coordinator import DocumentEventCoordinator

logger = logging.getLogger(__name__)

DEFAULT_PORT = 2087


class ServerInitializationState:
    """Tracks which server components came up and which failed."""

    def __init__(self):
        self.registered_features = []
        self.initialization_errors = []

    @property
    def features_registered(self) -> bool:
        return bool(self.registered_features)

    def add_error(self, component: str, error: Exception):
        """Add an initialization error for tracking."""
        self.initialization_errors.append((component, str(error)))
        logger.error(f"Initialization error in {component}: {error}")

    def get_error_summary(self) -> str:
        if not self.initialization_errors:
            return "No initialization errors"

        return f"Initialization errors: {'; '.join([f'{comp}: {err}' for comp, err in self.initialization_errors])}"


class SpringLSPServer:
    """
    Language server for Spring Boot configuration files.

    Serves completion, hover, formatting and YAML syntax diagnostics for
    ``.properties``, ``.yml`` and ``.yaml`` documents. The property catalog is
    loaded by the caller and shared read-only by every feature.
    """

    def __init__(self, catalog: PropertyCatalog, port: Optional[int] = None):
        """
        Initialize the server.

        Args:
            catalog: Property catalog used for completion and hover
            port: Port number for TCP mode
        """
        self.catalog = catalog
        self.port = port or DEFAULT_PORT

        self.service = SpringConfigService(catalog)
        self.ls = LanguageServer('springls', f'v{__version__}')
        self.document_coordinator = DocumentEventCoordinator()
        self.init_state = ServerInitializationState()

        self._register_handlers()
        self._register_features()

        logger.info(f"springls initialized with {len(catalog)} properties")
        logger.info(self.init_state.get_error_summary())

    def _register_handlers(self):
        """Register LSP lifecycle handlers."""

        @self.ls.feature("initialized")
        def initialized(params: InitializedParams):
            logger.info("LSP: Server initialized successfully")

        @self.ls.feature("shutdown")
        def shutdown(params=None):
            logger.info("LSP: Handling shutdown request")
            self._cleanup_resources()
            return None

    def _register_features(self):
        """
        Register LSP features with the server.

        Each feature registers independently so that one failing registration
        leaves the others available. Document notifications are attached last,
        once every listener has subscribed.

        Raises:
            RuntimeError: If no features could be registered
        """
        logger.info("LSP: Registering features...")

        registrations = [
            ("completion", lambda: register_completion(self.ls, self.service)),
            ("hover", lambda: register_hover(self.ls, self.service)),
            ("formatting", lambda: register_formatting(self.ls, self.service)),
            ("diagnostics", lambda: register_diagnostics(self.ls, self.service, self.document_coordinator)),
        ]
        for name, register in registrations:
            try:
                register()
                self.init_state.registered_features.append(name)
                logger.info(f"LSP: {name.capitalize()} feature registered")
            except Exception as e:
                self.init_state.add_error(f"{name.capitalize()} Feature", e)

        if self.document_coordinator.listener_count:
            try:
                self.document_coordinator.attach(self.ls)
            except Exception as e:
                self.init_state.add_error("Document Events", e)

        logger.info(
            f"LSP: Feature registration completed - "
            f"{len(self.init_state.registered_features)}/{len(registrations)} features registered"
        )

        if not self.init_state.features_registered:
            raise RuntimeError("No LSP features could be registered - server cannot provide language support")

    def _cleanup_resources(self):
        logger.info("Cleaning up LSP server resources...")
        try:
            self.document_coordinator.clear()
        except Exception as e:
            logger.error(f"Error clearing document listeners: {e}")
        logger.info("LSP server resource cleanup completed")

    def start(self, host: str = "localhost", use_tcp: bool = False):
        """Start the LSP server

        Args:
            host: Host to bind to when using TCP (default: localhost)
            use_tcp: Whether to use TCP instead of stdio (default: False)
        """
        logger.info("Starting springls...")

        try:
            if use_tcp:
                logger.info(f"Starting LSP TCP server on {host}:{self.port}...")
                self.ls.start_tcp(host, self.port)
                logger.info("LSP TCP server finished")
            else:
                logger.info("Starting LSP IO server...")
                self.ls.start_io()
                logger.info("LSP IO server finished")
        except KeyboardInterrupt:
            logger.info("Received shutdown signal")
        except BrokenPipeError:
            logger.info("Broken pipe - client disconnected")
        except EOFError:
            logger.info("EOF - no more input from client")
        except Exception as e:
            logger.error(f"Error in LSP server: {e}")
            import traceback
            logger.error(traceback.format_exc())
        finally:
            self.shutdown()

    def shutdown(self):
        """Shutdown the LSP server and cleanup resources"""
        logger.info("Shutting down springls...")
        self._cleanup_resources()
