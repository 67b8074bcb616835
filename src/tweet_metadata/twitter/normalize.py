import re
from typing import Optional
from urllib.parse import parse_qs

from tweet_metadata.twitter.models import ParsedUrlHint

STATUS_RE = re.compile(
    r"https?://(?P<host>[^/?#]+)/(?P<user>[^/?#]+)/status(?:es)?/(?P<id>\d+)",
    re.IGNORECASE,
)

WEB_STATUS_RE = re.compile(
    r"https?://(?P<host>[^/?#]+)/i/(?:web/)?status/(?P<id>\d+)",
    re.IGNORECASE,
)

IMAGE_RE = re.compile(
    r"https?://pbs\.twimg\.com/media/(?P<name>[\w-]+)(?:\.(?P<ext>[a-z0-9]+))?(?::[a-z0-9]+)?(?:\?(?P<query>[^#\s]*))?",
    re.IGNORECASE,
)

SUPPORTED_HOSTS = {
    "x.com",
    "twitter.com",
    "fxtwitter.com",
    "fixupx.com",
    "vxtwitter.com",
}

RESERVED_PATHS = {"i", "home", "search", "hashtag", "intent", "settings", "explore"}


def _host(raw: str) -> str:
    host = raw.lower().split(":")[0]
    for prefix in ("www.", "mobile."):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host


def parse_status_url(url: str) -> tuple[Optional[str], Optional[str]]:
    """Returns (username, status_id) for a status URL, or (None, None)."""
    match = STATUS_RE.match(url)
    if match and _host(match.group("host")) in SUPPORTED_HOSTS:
        user = match.group("user")
        if user.lower() not in RESERVED_PATHS:
            return user, match.group("id")

    match = WEB_STATUS_RE.match(url)
    if match and _host(match.group("host")) in SUPPORTED_HOSTS:
        return None, match.group("id")

    return None, None


def orig_image_url(url: str) -> Optional[str]:
    """Builds the :orig URL for a pbs.twimg.com media link."""
    match = IMAGE_RE.match(url)
    if not match:
        return None

    ext = match.group("ext")
    if not ext and match.group("query"):
        ext = parse_qs(match.group("query")).get("format", [None])[0]
    if not ext:
        return None

    return f"https://pbs.twimg.com/media/{match.group('name')}.{ext.lower()}:orig"


def parse_source_url(url: str, referer: Optional[str] = None) -> ParsedUrlHint:
    url = (url or "").strip()
    username, status_id = parse_status_url(url)
    image_url = orig_image_url(url)

    if referer and (username is None or status_id is None):
        ref_username, ref_status_id = parse_status_url(referer.strip())
        username = username or ref_username
        status_id = status_id or ref_status_id

    return ParsedUrlHint(
        url=url,
        username=username,
        status_id=status_id,
        is_direct_image_url=image_url is not None,
        orig_image_url=image_url,
    )
