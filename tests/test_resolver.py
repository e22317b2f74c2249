import logging

import pytest

from etsy_viewer.resolver import extract_listing_id


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.etsy.com/listing/123456789/some-title", "123456789"),
        ("https://www.etsy.com/LISTING/42", "42"),
        ("listing/7", "7"),
        ("https://www.etsy.com/listing/0012/x", "0012"),
        ("https://etsy.com/listing/111/a?ref=listing/222", "111"),
        ("https://www.etsy.com/listing/98abc", "98"),
    ],
)
def test_extracts_first_listing_id(url, expected):
    assert extract_listing_id(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "",
        None,
        "https://www.etsy.com/shop/SomeShop",
        "https://www.etsy.com/listing/abc123",
        "https://www.etsy.com/listing/",
        "https://www.etsy.com/listings/123",
    ],
)
def test_rejects_urls_without_listing_id(url):
    assert extract_listing_id(url) is None


def test_non_string_input_is_absent_not_raised():
    assert extract_listing_id(12345) is None
    assert extract_listing_id(["listing/1"]) is None
    assert extract_listing_id(b"listing/1") is None


def test_logs_extraction(caplog):
    with caplog.at_level(logging.DEBUG, logger="etsy_viewer.resolver"):
        extract_listing_id("https://www.etsy.com/listing/55")
    assert "55" in caplog.text


class Unreadable:
    def __bool__(self):
        raise RuntimeError("cannot inspect")


def test_input_that_fails_inspection_is_absent():
    assert extract_listing_id(Unreadable()) is None
