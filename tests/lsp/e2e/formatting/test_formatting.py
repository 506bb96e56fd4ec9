import pytest
from lsprotocol.types import DocumentFormattingParams, FormattingOptions, TextDocumentIdentifier
from pytest_lsp import LanguageClient


def formatting_params(uri: str) -> DocumentFormattingParams:
    return DocumentFormattingParams(
        text_document=TextDocumentIdentifier(uri=uri),
        options=FormattingOptions(tab_size=2, insert_spaces=True),
    )


@pytest.mark.asyncio
async def test_format_properties(client: LanguageClient, open_document):
    uri = open_document("application.properties")

    edits = await client.text_document_formatting_async(formatting_params(uri))

    assert len(edits) == 1
    assert "server.port=8080" in edits[0].new_text
    assert "# Demo application" in edits[0].new_text


@pytest.mark.asyncio
async def test_format_yaml(client: LanguageClient, open_document):
    uri = open_document("application.yml", "server:\n    port:    8080\n")

    edits = await client.text_document_formatting_async(formatting_params(uri))

    assert len(edits) == 1
    assert edits[0].new_text == "server:\n  port: 8080\n"


@pytest.mark.asyncio
async def test_broken_yaml_is_left_alone(client: LanguageClient, open_document):
    uri = open_document("broken.yml")

    edits = await client.text_document_formatting_async(formatting_params(uri))

    assert not edits
