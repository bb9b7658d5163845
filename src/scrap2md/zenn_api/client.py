"""
Purpose: Fetch a scrap's blob.json and deserialize it into Scrap.
Constraints: One request per call; failures propagate to the caller.
"""

# Imports
import logging
from typing import Optional

from pydantic import ValidationError

from scrap2md.core.config_models import ZennSettings
from scrap2md.core.errors import FetchFailed, MalformedResponse
from scrap2md.core.models import Scrap
from scrap2md.core.utils.http import get_once

logger = logging.getLogger(__name__)


# Public API
def parse_scrap(payload) -> Scrap:
    """Validate a decoded blob.json payload; unknown fields are ignored."""
    try:
        return Scrap.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse(
            f"Unexpected scrap payload ({exc.error_count()} errors): {exc.errors()[0]['msg']}"
        ) from exc


def fetch_scrap(
    slug: str,
    credential: Optional[str] = None,
    settings: Optional[ZennSettings] = None,
) -> Scrap:
    """Download and parse the scrap identified by ``slug``.

    ``credential`` is a ready-to-send cookie header value; when absent the
    request is anonymous.
    """
    settings = settings or ZennSettings()
    url = settings.blob_url(slug)
    headers = {"Accept": "application/json"}
    if credential:
        headers["Cookie"] = credential

    logger.info(
        "Fetching scrap %s (%s)", slug, "authenticated" if credential else "anonymous"
    )
    resp = get_once(url, headers=headers, timeout=settings.http_timeout)
    if not 200 <= resp.status_code < 300:
        raise FetchFailed(resp.status_code, url)

    try:
        payload = resp.json()
    except ValueError as exc:
        raise MalformedResponse(f"Response from {url} is not JSON") from exc

    scrap = parse_scrap(payload)
    logger.info("Fetched '%s' with %d top-level comments", scrap.title, len(scrap.comments))
    return scrap
