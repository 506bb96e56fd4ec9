import pytest
from lsprotocol.types import (
    CompletionList,
    CompletionParams,
    Position,
    TextDocumentIdentifier,
)
from pytest_lsp import LanguageClient


async def complete(client: LanguageClient, uri: str, line: int, character: int) -> CompletionList:
    return await client.text_document_completion_async(
        params=CompletionParams(
            position=Position(line=line, character=character),
            text_document=TextDocumentIdentifier(uri=uri),
        )
    )


@pytest.mark.asyncio
async def test_properties_completions(client: LanguageClient, open_document):
    """Declared properties are not offered again; their siblings are."""
    uri = open_document("application.properties")

    results = await complete(client, uri, 3, 0)

    assert results is not None
    labels = [item.label for item in results.items]
    assert "spring.datasource.username" in labels
    assert "spring.datasource.url" not in labels
    assert "server.port" not in labels


@pytest.mark.asyncio
async def test_yaml_nested_completions(client: LanguageClient, open_document):
    uri = open_document("application.yml", "server:\n  port: 8080\n  ")

    results = await complete(client, uri, 2, 2)

    labels = [item.label for item in results.items]
    assert "address" in labels
    assert "port" not in labels


@pytest.mark.asyncio
async def test_completions_in_broken_document(client: LanguageClient, open_document):
    uri = open_document("broken.yml")

    results = await complete(client, uri, 2, 2)

    assert results is not None
    assert len(results.items) > 0


@pytest.mark.asyncio
async def test_unopened_document_has_no_completions(client: LanguageClient):
    results = await complete(client, "file:///not/open/application.yml", 0, 0)

    assert results is not None
    assert results.items == []
