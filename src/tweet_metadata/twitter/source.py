import logging
from typing import Optional

from tweet_metadata.config import Config, load_config
from tweet_metadata.twitter.fetcher import fetch_status
from tweet_metadata.twitter.media import resolve_media
from tweet_metadata.twitter.models import NormalizedMetadata, ParsedUrlHint, PostSnapshot
from tweet_metadata.twitter.normalize import parse_source_url
from tweet_metadata.twitter.parser import parse_status_json
from tweet_metadata.twitter.proxy import decode_proxy_url
from tweet_metadata.twitter.tags import extract_tags
from tweet_metadata.utils.text_format import format_commentary

logger = logging.getLogger(__name__)

BASE_URL = "https://twitter.com"


def tag_name(hint: ParsedUrlHint, snapshot: Optional[PostSnapshot]) -> str:
    if hint.username:
        return hint.username
    if snapshot is not None:
        return snapshot.author.handle
    return ""


def canonical_source_url(hint: ParsedUrlHint) -> Optional[str]:
    if hint.username and hint.status_id:
        return f"{BASE_URL}/{hint.username}/status/{hint.status_id}"
    if hint.status_id:
        return f"{BASE_URL}/i/web/status/{hint.status_id}"
    return decode_proxy_url(hint.url)


def normalize(hint: ParsedUrlHint, snapshot: Optional[PostSnapshot]) -> NormalizedMetadata:
    """Builds the normalized metadata from a URL hint and an optional snapshot."""
    image_urls, preview_urls = resolve_media(snapshot, hint)
    name = tag_name(hint, snapshot)

    page_url = f"{BASE_URL}/{name}/status/{hint.status_id}" if name and hint.status_id else None
    profile_url = f"{BASE_URL}/{name}" if name else None

    intent_url = None
    if snapshot is not None and snapshot.author.id:
        intent_url = f"{BASE_URL}/intent/user?user_id={snapshot.author.id}"

    if snapshot is not None:
        artist_name = snapshot.author.display_name
        commentary = snapshot.full_text
    else:
        artist_name = name
        commentary = ""

    return NormalizedMetadata(
        image_urls=tuple(image_urls),
        preview_urls=tuple(preview_urls),
        page_url=page_url,
        profile_url=profile_url,
        intent_url=intent_url,
        tag_name=name,
        artist_name=artist_name,
        commentary_plain=commentary,
        commentary_formatted=format_commentary(snapshot),
        tags=tuple(extract_tags(snapshot)),
        canonical_source_url=canonical_source_url(hint),
        profile_urls=tuple(url for url in (profile_url, intent_url) if url),
        commentary_title="",
        artist_finder_url=profile_url.lower() if profile_url else (hint.url or None),
    )


async def extract(url: str, referer: Optional[str] = None, config: Optional[Config] = None) -> NormalizedMetadata:
    """Parses the URL, fetches the status when possible and normalizes it."""
    config = config or load_config()
    hint = parse_source_url(url, referer)

    snapshot = None
    if hint.status_id and config.fetch_enabled:
        data = await fetch_status(hint.status_id, config)
        snapshot = parse_status_json(data)
        if snapshot is None:
            logger.info(f"No snapshot for status {hint.status_id}, using URL data only")

    return normalize(hint, snapshot)
