from lsprotocol import types
from pygls.server import LanguageServer
from typing import Optional
import logging

from springls.lsp.service import SpringConfigService
from springls.lsp.utils.coordinates import to_client_range, to_server_position

logger = logging.getLogger(__name__)


def register_completion(server: LanguageServer, service: SpringConfigService):
    """
    Register completion functionality with the LSP server.

    Args:
        server: The language server instance
        service: Core service computing the completion items
    """

    completion_options = types.CompletionOptions(
        trigger_characters=['.', ':', '=', ' '],
        resolve_provider=False,
    )

    @server.feature(types.TEXT_DOCUMENT_COMPLETION, completion_options)
    def completions(ls: LanguageServer, params: types.CompletionParams) -> Optional[types.CompletionList]:
        """
        Provide key or value completions for the given text document position.

        Returns an empty list for documents that are not open, never None, so
        clients do not fall back to word based completion inside config files.
        """
        uri = params.text_document.uri
        logger.debug(f"Completion request received for {uri} at position {params.position}")

        try:
            if uri not in ls.workspace.text_documents:
                logger.debug(f"Document {uri} is not open - returning no completions")
                return types.CompletionList(is_incomplete=False, items=[])

            document = ls.workspace.get_text_document(uri)
            position = to_server_position(document, params.position)
            items = service.completion(uri, document.source, position)
            for item in items:
                item.text_edit.range = to_client_range(document, item.text_edit.range)
            logger.debug(f"Returning CompletionList with {len(items)} items")
            return types.CompletionList(is_incomplete=False, items=items)

        except Exception as e:
            logger.error(f"Error in completion handler: {e}")
            return types.CompletionList(is_incomplete=False, items=[])
