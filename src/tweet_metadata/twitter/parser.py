import logging
from typing import Any, Optional

from tweet_metadata.twitter.models import (
    ANIMATED_GIF,
    PHOTO,
    VIDEO,
    Author,
    MediaItem,
    MediaVariant,
    PostSnapshot,
)

logger = logging.getLogger(__name__)

MEDIA_KINDS = {
    "photo": PHOTO,
    "video": VIDEO,
    "animated_gif": ANIMATED_GIF,
}


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def parse_bitrate(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_variants(media: dict) -> list[MediaVariant]:
    variants = []
    for raw in _list(_dict(media.get("video_info")).get("variants")):
        if not isinstance(raw, dict) or not raw.get("url"):
            continue
        variants.append(MediaVariant(
            content_type=raw.get("content_type", ""),
            url=raw["url"],
            bitrate=parse_bitrate(raw.get("bitrate")),
        ))
    return variants


def parse_media(data: dict) -> list[MediaItem]:
    items = []
    for media in _list(_dict(data.get("extended_entities")).get("media")):
        if not isinstance(media, dict):
            continue
        kind = MEDIA_KINDS.get(media.get("type", ""))
        if kind is None:
            logger.debug(f"Skipping media of unknown type: {media.get('type')}")
            continue
        items.append(MediaItem(
            kind=kind,
            media_url=media.get("media_url_https") or "",
            source_url=media.get("url") or "",
            variants=parse_variants(media),
        ))
    return items


def parse_status_json(data: Any) -> Optional[PostSnapshot]:
    """Maps a v1.1 status object (tweet_mode=extended) onto a PostSnapshot."""
    if not isinstance(data, dict) or not data:
        return None

    user = _dict(data.get("user"))
    entities = _dict(data.get("entities"))

    hashtags = [
        tag["text"] for tag in _list(entities.get("hashtags"))
        if isinstance(tag, dict) and tag.get("text")
    ]

    urls = {}
    for entity in _list(entities.get("urls")):
        if isinstance(entity, dict) and entity.get("url"):
            urls[entity["url"]] = entity.get("expanded_url") or entity["url"]

    snapshot = PostSnapshot(
        id=str(data.get("id_str") or data.get("id") or ""),
        author=Author(
            id=str(user.get("id_str") or user.get("id") or ""),
            handle=user.get("screen_name") or "",
            display_name=user.get("name") or "",
        ),
        full_text=data.get("full_text") or data.get("text") or "",
        hashtags=hashtags,
        urls=urls,
        extended_media=parse_media(data),
    )
    logger.debug(
        f"Parsed status {snapshot.id}: {len(snapshot.extended_media)} media, "
        f"{len(hashtags)} hashtags, {len(urls)} urls"
    )
    return snapshot
