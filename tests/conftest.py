"""
Global pytest configuration and fixtures.
"""

import os

import pytest

from springls.config.catalog import load_catalog
from springls.lsp.service import SpringConfigService


@pytest.fixture(scope="session")
def catalog():
    """The bundled Spring Boot property catalog."""
    return load_catalog()


@pytest.fixture
def service(catalog):
    return SpringConfigService(catalog)


@pytest.fixture(autouse=True)
def isolate_environment():
    """Keep user level springls settings out of the tests.

    A developer's SPRINGLS_CATALOG would otherwise change which properties
    are suggested, and SPRINGLS_DEBUG would flood the captured output.
    """
    saved = {name: os.environ.pop(name, None) for name in ("SPRINGLS_CATALOG", "SPRINGLS_DEBUG")}
    yield
    for name, value in saved.items():
        if value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = value
