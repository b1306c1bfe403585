import json
from pathlib import Path
from typing import Any, Callable

import pytest

from jsonapi_related.config import DecoderSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def json_fixture() -> Callable[[str], dict[str, Any]]:
    """Load ``tests/fixtures/<name>.json`` as a parsed document."""

    def load(name: str) -> dict[str, Any]:
        return json.loads((FIXTURES_DIR / f"{name}.json").read_text())

    return load


@pytest.fixture
def settings() -> DecoderSettings:
    return DecoderSettings()


@pytest.fixture
def store_json() -> dict[str, Any]:
    return {
        "id": "2",
        "type": "stores",
        "attributes": {"name": "full store"},
        "relationships": {
            "books": {
                "data": [{"id": str(i), "type": "books"} for i in range(1, 12)]
            }
        },
    }
