import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

LISTING_ID_RE = re.compile(r"listing/(\d+)", re.IGNORECASE)


def extract_listing_id(url_string: Optional[str]) -> Optional[str]:
    """Return the digits following the first ``listing/`` in a URL, or None.

    The ID is kept as a string so leading zeros survive. Anything that cannot
    be matched (None, non-strings, objects that fail when inspected) resolves
    to None instead of raising.
    """
    try:
        if not url_string:
            return None
        match = LISTING_ID_RE.search(url_string)
    except Exception:
        logger.debug("Could not match listing ID in %r", url_string, exc_info=True)
        return None
    listing_id = match.group(1) if match else None
    logger.debug("Extracted listing ID from %r: %s", url_string, listing_id)
    return listing_id
