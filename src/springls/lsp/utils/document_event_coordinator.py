"""
Fan-out of document lifecycle notifications to interested features.

pygls accepts one handler per notification, so didOpen/didChange/didClose
are registered here exactly once and forwarded, by document URI, to every
subscribed listener. A failing listener is logged and skipped; it never
stops the others or the server loop.
"""

import logging
from typing import List, Protocol

from lsprotocol import types
from pygls.server import LanguageServer

logger = logging.getLogger(__name__)


class DocumentListener(Protocol):
    """Receives document lifecycle events by URI."""

    def document_opened(self, uri: str) -> None:
        ...

    def document_changed(self, uri: str) -> None:
        ...

    def document_closed(self, uri: str) -> None:
        ...


class DocumentEventCoordinator:
    """Registers document notifications once and forwards them to listeners."""

    def __init__(self):
        self._listeners: List[DocumentListener] = []
        self._attached = False

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: DocumentListener) -> None:
        """
        Add a listener; listeners are notified in subscription order.

        Raises:
            ValueError: If listener is None
        """
        if listener is None:
            raise ValueError("Listener cannot be None")
        if listener in self._listeners:
            logger.warning(f"Listener {type(listener).__name__} is already subscribed")
            return
        self._listeners.append(listener)
        logger.info(f"Subscribed document listener: {type(listener).__name__}")

    def attach(self, server: LanguageServer) -> None:
        """
        Register the document notifications with the server.

        Only the first call has an effect.

        Raises:
            ValueError: If server is None
        """
        if server is None:
            raise ValueError("Server cannot be None")
        if self._attached:
            logger.warning("Document notifications already registered with server")
            return

        @server.feature(types.TEXT_DOCUMENT_DID_OPEN)
        def did_open(params: types.DidOpenTextDocumentParams):
            self._dispatch("document_opened", params.text_document.uri)

        @server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
        def did_change(params: types.DidChangeTextDocumentParams):
            self._dispatch("document_changed", params.text_document.uri)

        @server.feature(types.TEXT_DOCUMENT_DID_CLOSE)
        def did_close(params: types.DidCloseTextDocumentParams):
            self._dispatch("document_closed", params.text_document.uri)

        self._attached = True
        logger.info(f"Document notifications registered for {self.listener_count} listeners")

    def _dispatch(self, event: str, uri: str) -> None:
        for listener in list(self._listeners):
            try:
                getattr(listener, event)(uri)
            except Exception as e:
                logger.error(f"Error in {event} listener {type(listener).__name__}: {e}")

    def clear(self) -> None:
        """Drop every listener, used during shutdown."""
        count = len(self._listeners)
        self._listeners.clear()
        logger.info(f"Cleared {count} document listeners")
