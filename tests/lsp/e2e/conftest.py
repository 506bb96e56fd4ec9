import os
import sys
from pathlib import Path
from typing import Optional

import pytest
import pytest_lsp
from lsprotocol.types import (
    ClientCapabilities,
    DidOpenTextDocumentParams,
    InitializeParams,
    TextDocumentItem,
)
from pytest_lsp import ClientServerConfig, LanguageClient

# Documents used by the end-to-end tests
TEST_CONFIG_DIR = Path(__file__).parent.parent / "fixtures" / "e2e-config"


@pytest_lsp.fixture(
    config=ClientServerConfig(
        server_command=[sys.executable, "-m", "springls", "lsp"],
    ),
)
async def client(lsp_client: LanguageClient):
    original_cwd = os.getcwd()
    os.chdir(str(TEST_CONFIG_DIR))

    try:
        params = InitializeParams(capabilities=ClientCapabilities())
        await lsp_client.initialize_session(params)

        yield

        await lsp_client.shutdown_session()
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def open_document(client: LanguageClient):
    """Open a fixture document (or the given text under its name) and return its URI."""

    def _open(name: str, text: Optional[str] = None) -> str:
        path = (TEST_CONFIG_DIR / name).resolve()
        if text is None:
            text = path.read_text()
        uri = path.as_uri()
        language_id = "properties" if name.endswith(".properties") else "yaml"
        client.text_document_did_open(
            DidOpenTextDocumentParams(
                text_document=TextDocumentItem(uri=uri, language_id=language_id, version=1, text=text)
            )
        )
        return uri

    return _open
