"""Decoding of legacy o.twimg.com proxy links.

Old tweets hotlinked third-party images through
``https://o.twimg.com/<n>/proxy.jpg?t=<token>&...``, where the token is a
base64 blob that embeds the original image URL.
"""

import base64
import binascii
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

PROXY_RE = re.compile(
    r"^https?://(?:o|image-proxy-origin)\.twimg\.com/\d/proxy\.jpg\?t=(?P<token>[\w+/=-]+)&",
    re.IGNORECASE,
)

EMBEDDED_URL_RE = re.compile(r"https?://[^\s\"'<>\x00-\x1f\x7f-\xff]+", re.IGNORECASE)

TWITPIC_RE = re.compile(r"^https?://twitpic\.com/show/large/[a-z0-9]+", re.IGNORECASE)


def _decode_token(token: str) -> Optional[bytes]:
    token = token.replace("-", "+").replace("_", "/").rstrip("=")
    token += "=" * (-len(token) % 4)
    try:
        return base64.b64decode(token)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Undecodable proxy token {token!r}: {e}")
        return None


def _canonical_twitpic_url(url: str) -> str:
    url = re.sub(r"show/large/", "", url, count=1, flags=re.IGNORECASE)
    head, _, last_segment = url.rpartition("/")
    if "." in last_segment:
        last_segment = last_segment[:last_segment.rindex(".")]
    return f"{head}/{last_segment}"


def decode_proxy_url(url: str) -> Optional[str]:
    """Returns the source URL hidden in a proxy link, or None."""
    match = PROXY_RE.match(url or "")
    if not match:
        return None

    decoded = _decode_token(match.group("token"))
    if decoded is None:
        return None

    embedded = EMBEDDED_URL_RE.search(decoded.decode("latin-1"))
    if not embedded:
        logger.debug(f"No URL embedded in proxy link {url}")
        return None

    source = embedded.group(0)
    if TWITPIC_RE.match(source):
        source = _canonical_twitpic_url(source)
    return source
