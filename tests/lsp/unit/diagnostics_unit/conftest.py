from unittest.mock import Mock

import pytest

from springls.lsp.features.diagnostics.diagnostics import DiagnosticsService


@pytest.fixture
def broken_yaml():
    """An application.yml whose last value is an unterminated string."""
    return 'server:\n  port: 8080\n  \nspring:\n  application:\n    name: "demo\n'


@pytest.fixture
def server(broken_yaml):
    """Mock language server whose workspace holds the broken document at version 1."""
    server = Mock()
    server.workspace.get_text_document.return_value = Mock(source=broken_yaml, version=1)
    return server


@pytest.fixture
def diagnostics_service(service, server):
    diagnostics_service = DiagnosticsService(service)
    diagnostics_service.set_server(server)
    return diagnostics_service
