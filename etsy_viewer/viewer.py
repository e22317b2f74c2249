"""
Listing viewer state and the single request/response cycle behind it.

A ``ListingViewer`` holds what the page shows for one session: the submitted
URL, a loading flag, an error message and the fetched listing. ``submit``
resolves the listing ID locally, then makes one GET to the listing-details
endpoint with the raw URL as the ``url`` query parameter. There is no retry
and, unless configured, no timeout.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from .resolver import extract_listing_id

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = (
    "Invalid Etsy Listing URL format. Please ensure it contains "
    "'/listing/...' followed by numbers."
)
FETCH_FAILED_MESSAGE = "Failed to fetch listing data. Check the console or backend server logs."
NO_DESCRIPTION = "No description available."


def format_amount(amount: Any) -> str:
    """Render ``amount / 100`` the way a JavaScript number prints."""
    try:
        value = amount / 100
    except TypeError:
        return "NaN"
    except OverflowError:
        # too large for a float; JSON.parse reads these as Infinity
        return "Infinity" if amount > 0 else "-Infinity"
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _or_empty(value: Any) -> Any:
    return "" if value is None else value


class ListingDetails:
    """Read-only view over a listing-details response body.

    The shape is trusted as returned. Missing title and quantity read as an
    empty string so they render as nothing; a missing ``url`` reads as None.
    """

    def __init__(self, data: Mapping[str, Any]):
        self.raw = data

    def _get(self, key: str) -> Any:
        return self.raw.get(key)

    @property
    def title(self) -> str:
        return _or_empty(self._get("title"))

    @property
    def images(self) -> List[Dict[str, Any]]:
        return self._get("images") or []

    @property
    def first_image_url(self) -> Optional[str]:
        images = self.images
        if not images:
            return None
        return images[0].get("url_fullxfull")

    @property
    def price(self) -> Dict[str, Any]:
        return self._get("price") or {}

    @property
    def price_amount(self) -> str:
        return format_amount(self.price.get("amount"))

    @property
    def currency_code(self) -> str:
        return self.price.get("currency_code") or ""

    @property
    def quantity(self) -> Any:
        return _or_empty(self._get("quantity"))

    @property
    def description(self) -> str:
        return self._get("description") or NO_DESCRIPTION

    @property
    def url(self) -> Optional[str]:
        return self._get("url")


def error_message_from_response(response: Optional[requests.Response]) -> str:
    """Build the user-facing message for a failed fetch.

    A JSON object body with a ``message`` gives ``Error: <message> (<error>)``,
    the parenthesised part only when ``error`` is present. Anything else falls
    back to the generic message.
    """
    if response is None:
        return FETCH_FAILED_MESSAGE
    try:
        body = response.json()
    except ValueError:
        return FETCH_FAILED_MESSAGE
    if not isinstance(body, dict) or not body.get("message"):
        return FETCH_FAILED_MESSAGE
    detail = f"({body['error']})" if body.get("error") else ""
    return f"Error: {body['message']} {detail}"


class ListingViewer:
    def __init__(
        self,
        endpoint: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.endpoint = endpoint
        # without an injected session each fetch is a one-off requests.get
        self.session = session
        self.timeout = timeout
        self.url = ""
        self.is_loading = False
        self.error = ""
        self.listing: Optional[ListingDetails] = None

    def submit(self, url: str) -> Optional[ListingDetails]:
        self.url = url
        self.error = ""
        self.listing = None

        listing_id = extract_listing_id(url)
        if not listing_id:
            self.error = INVALID_URL_MESSAGE
            return None

        self.is_loading = True
        try:
            logger.info("Fetching listing %s from %s", listing_id, self.endpoint)
            get = self.session.get if self.session is not None else requests.get
            resp = get(self.endpoint, params={"url": url}, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            logger.error("Error fetching from backend: %s", exc, exc_info=True)
            self.error = error_message_from_response(exc.response)
        else:
            if isinstance(data, dict):
                self.listing = ListingDetails(data)
            else:
                logger.error("Unexpected listing-details body: %r", data)
                self.error = FETCH_FAILED_MESSAGE
        finally:
            self.is_loading = False
        return self.listing
