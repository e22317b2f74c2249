"""Shared fixtures: fake HTTP responses for the listing-details endpoint."""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests


def make_response(status: int = 200, body: Any = None, text: Optional[str] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = "http://localhost:3001/api/listing-details"
    if text is None:
        text = json.dumps(body)
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def listing_body() -> dict:
    return {
        "title": "Hand-thrown Mug",
        "images": [
            {"url_fullxfull": "https://i.etsystatic.com/1/il_fullxfull.jpg"},
            {"url_fullxfull": "https://i.etsystatic.com/2/il_fullxfull.jpg"},
        ],
        "price": {"amount": 2450, "divisor": 100, "currency_code": "USD"},
        "quantity": 3,
        "description": "Glazed <b>blue</b>.\nDishwasher safe.",
        "url": "https://www.etsy.com/listing/123456/hand-thrown-mug",
    }
