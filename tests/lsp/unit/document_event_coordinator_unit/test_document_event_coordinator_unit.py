from unittest.mock import Mock

import pytest
from lsprotocol import types

from springls.lsp.utils.document_event_coordinator import DocumentEventCoordinator


class RecordingListener:
    def __init__(self):
        self.events = []

    def document_opened(self, uri):
        self.events.append(("opened", uri))

    def document_changed(self, uri):
        self.events.append(("changed", uri))

    def document_closed(self, uri):
        self.events.append(("closed", uri))


class FailingListener(RecordingListener):
    def document_opened(self, uri):
        raise RuntimeError("boom")


def attach_and_capture(coordinator):
    """Attach to a mock server and return the registered handlers by method name."""
    handlers = {}
    server = Mock()

    def feature(name, *args):
        def decorator(fn):
            handlers[name] = fn
            return fn
        return decorator

    server.feature.side_effect = feature
    coordinator.attach(server)
    return server, handlers


def open_params(uri):
    return types.DidOpenTextDocumentParams(
        text_document=types.TextDocumentItem(uri=uri, language_id="yaml", version=1, text="")
    )


def test_subscribe_rejects_none():
    with pytest.raises(ValueError):
        DocumentEventCoordinator().subscribe(None)


def test_duplicate_subscription_is_ignored():
    coordinator = DocumentEventCoordinator()
    listener = RecordingListener()
    coordinator.subscribe(listener)
    coordinator.subscribe(listener)
    assert coordinator.listener_count == 1


def test_events_reach_every_listener():
    coordinator = DocumentEventCoordinator()
    first, second = RecordingListener(), RecordingListener()
    coordinator.subscribe(first)
    coordinator.subscribe(second)
    _, handlers = attach_and_capture(coordinator)

    handlers[types.TEXT_DOCUMENT_DID_OPEN](open_params("file:///a.yml"))
    handlers[types.TEXT_DOCUMENT_DID_CLOSE](
        types.DidCloseTextDocumentParams(text_document=types.TextDocumentIdentifier(uri="file:///a.yml"))
    )

    assert first.events == [("opened", "file:///a.yml"), ("closed", "file:///a.yml")]
    assert second.events == first.events


def test_failing_listener_does_not_block_others():
    coordinator = DocumentEventCoordinator()
    healthy = RecordingListener()
    coordinator.subscribe(FailingListener())
    coordinator.subscribe(healthy)
    _, handlers = attach_and_capture(coordinator)

    handlers[types.TEXT_DOCUMENT_DID_OPEN](open_params("file:///a.yml"))

    assert healthy.events == [("opened", "file:///a.yml")]


def test_attach_registers_once():
    coordinator = DocumentEventCoordinator()
    server, handlers = attach_and_capture(coordinator)
    coordinator.attach(server)

    assert set(handlers) == {
        types.TEXT_DOCUMENT_DID_OPEN,
        types.TEXT_DOCUMENT_DID_CHANGE,
        types.TEXT_DOCUMENT_DID_CLOSE,
    }
    assert server.feature.call_count == 3


def test_attach_rejects_none():
    with pytest.raises(ValueError):
        DocumentEventCoordinator().attach(None)


def test_clear_drops_listeners():
    coordinator = DocumentEventCoordinator()
    coordinator.subscribe(RecordingListener())
    coordinator.clear()
    assert coordinator.listener_count == 0
