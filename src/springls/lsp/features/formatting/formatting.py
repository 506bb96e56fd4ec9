"""Whole-document formatting for properties and YAML files."""

import logging
from typing import List

from lsprotocol import types
from pygls.server import LanguageServer

from springls.lsp.service import SpringConfigService

logger = logging.getLogger(__name__)


def register_formatting(server: LanguageServer, service: SpringConfigService):
    """
    Register document formatting with the LSP server.

    A YAML document that does not parse is never rewritten; the handler
    answers with no edits instead.

    Args:
        server: The language server instance
        service: Core service producing the formatted text
    """

    @server.feature(types.TEXT_DOCUMENT_FORMATTING)
    def formatting(ls: LanguageServer, params: types.DocumentFormattingParams) -> List[types.TextEdit]:
        uri = params.text_document.uri
        try:
            if uri not in ls.workspace.text_documents:
                return []
            document = ls.workspace.get_text_document(uri)
            edits = service.format_edits(uri, document.source)
            logger.debug(f"Formatting {uri}: {len(edits)} edits")
            return edits
        except Exception as e:
            logger.error(f"Error in formatting handler: {e}")
            return []
