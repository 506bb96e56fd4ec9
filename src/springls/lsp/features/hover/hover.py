"""Hover documentation for configuration properties."""

import logging
from typing import Optional

from lsprotocol import types
from pygls.server import LanguageServer

from springls.lsp.service import SpringConfigService
from springls.lsp.utils.coordinates import to_client_range, to_server_position

logger = logging.getLogger(__name__)


def register_hover(server: LanguageServer, service: SpringConfigService):
    """
    Register hover functionality with the LSP server.

    Args:
        server: The language server instance
        service: Core service resolving the property under the cursor
    """

    @server.feature(types.TEXT_DOCUMENT_HOVER)
    def hover(ls: LanguageServer, params: types.HoverParams) -> Optional[types.Hover]:
        uri = params.text_document.uri
        try:
            if uri not in ls.workspace.text_documents:
                return None
            document = ls.workspace.get_text_document(uri)
            result = service.hover(uri, document.source, to_server_position(document, params.position))
            if result is not None and result.range is not None:
                result.range = to_client_range(document, result.range)
            return result
        except Exception as e:
            logger.error(f"Error in hover handler: {e}")
            return None
