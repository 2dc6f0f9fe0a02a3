import json

import pytest

from json_to_code.languages.java import JavaGenerator
from json_to_code.languages.typescript import TypeScriptGenerator

CATALOG = {
    "id": 10,
    "name": "Catalog",
    "price": 19.9,
    "active": True,
    "tags": [],
    "owner": {"first_name": "Ana", "contact": {"email": "a@b.c"}},
    "categories": [
        {
            "id": 1,
            "children": [{"id": 2, "children": []}],
            "owner": {"first_name": "Bia"},
        }
    ],
    "matrix": [[1, 2], [3]],
    "notes": None,
}


@pytest.fixture
def order_json():
    return '{"id":1,"address":{"city":"X","zip":"00000"}}'


@pytest.fixture
def catalog_json():
    return json.dumps(CATALOG)


@pytest.fixture
def typescript():
    return TypeScriptGenerator()


@pytest.fixture
def java():
    return JavaGenerator()
