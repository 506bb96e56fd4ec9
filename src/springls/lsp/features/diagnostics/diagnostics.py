"""YAML syntax diagnostics for the LSP server."""

import logging
from typing import Dict, List, Optional, Tuple

from lsprotocol import types
from pygls.server import LanguageServer

from springls.lsp.service import SpringConfigService
from springls.lsp.utils.document_event_coordinator import DocumentEventCoordinator


logger = logging.getLogger(__name__)


class DiagnosticsService:
    """Validates documents as they open and change and publishes the results."""

    def __init__(self, service: SpringConfigService):
        self._service = service
        self._diagnostics: Dict[str, Tuple[int, List[types.Diagnostic]]] = {}
        self._server: Optional[LanguageServer] = None

    def set_server(self, server: LanguageServer) -> None:
        """Set the server instance for reading documents and publishing diagnostics."""
        self._server = server

    def document_opened(self, uri: str) -> None:
        self._refresh(uri)

    def document_changed(self, uri: str) -> None:
        self._refresh(uri)

    def document_closed(self, uri: str) -> None:
        """Forget the document and clear its diagnostics in the client."""
        self._diagnostics.pop(uri, None)
        if self._server:
            self._server.publish_diagnostics(uri, [])

    def _refresh(self, uri: str) -> None:
        if not self._server:
            logger.error("Server not set - cannot read document")
            return
        document = self._server.workspace.get_text_document(uri)
        self.parse_document(uri, document.source, document.version or 0)
        self.publish_diagnostics(uri)

    def parse_document(self, document_uri: str, document_source: str, document_version: int) -> None:
        """
        Validate a document and store its diagnostics.

        Args:
            document_uri: URI of the document
            document_source: Full text of the document
            document_version: Version of the document
        """
        try:
            diagnostics = self._service.validate(document_uri, document_source)
        except Exception as e:
            logger.error(f"Error validating document {document_uri}: {e}")
            diagnostics = []
        self._diagnostics[document_uri] = (document_version, diagnostics)

    def get_diagnostics(self, document_uri: str) -> Tuple[int, List[types.Diagnostic]]:
        """
        Get diagnostics for a document.

        Returns:
            Tuple of (version, diagnostics)
        """
        return self._diagnostics.get(document_uri, (0, []))

    def publish_diagnostics(self, document_uri: str) -> None:
        if not self._server:
            logger.error("Server not set - cannot publish diagnostics")
            return

        version, diagnostics = self.get_diagnostics(document_uri)
        self._server.publish_diagnostics(
            uri=document_uri,
            diagnostics=diagnostics,
            version=version
        )


def register_diagnostics(
    server: LanguageServer,
    service: SpringConfigService,
    coordinator: DocumentEventCoordinator,
) -> DiagnosticsService:
    """
    Register diagnostics functionality with the LSP server.

    Args:
        server: The language server instance
        service: Core service performing validation
        coordinator: Coordinator delivering document lifecycle events

    Returns:
        The diagnostics service instance
    """
    diagnostics_service = DiagnosticsService(service)
    diagnostics_service.set_server(server)
    coordinator.subscribe(diagnostics_service)
    logger.info("Diagnostics functionality registered successfully")
    return diagnostics_service
