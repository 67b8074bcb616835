import logging
import re
from typing import Optional

from tweet_metadata.twitter.models import (
    ANIMATED_GIF,
    PHOTO,
    VIDEO,
    MediaItem,
    MediaVariant,
    ParsedUrlHint,
    PostSnapshot,
)

logger = logging.getLogger(__name__)

MP4 = "video/mp4"
ORIG_SUFFIX_RE = re.compile(r":orig$")


def best_mp4_variant(variants: list[MediaVariant]) -> Optional[MediaVariant]:
    """Highest-bitrate mp4 variant; the first one wins a tie.

    A variant without a bitrate only wins when no mp4 variant reports one.
    """
    best = None
    for variant in variants:
        if variant.content_type != MP4:
            continue
        if best is None:
            best = variant
            continue
        if variant.bitrate is None:
            continue
        if best.bitrate is None or variant.bitrate > best.bitrate:
            best = variant
    return best


def preview_url(url: str) -> str:
    return ORIG_SUFFIX_RE.sub(":small", url)


def _resolve_item(item: MediaItem) -> Optional[tuple[str, str]]:
    if item.kind == PHOTO:
        return f"{item.media_url}:orig", f"{item.media_url}:small"

    if item.kind in (VIDEO, ANIMATED_GIF):
        variant = best_mp4_variant(item.variants)
        if variant is None:
            logger.debug(f"No mp4 variant for {item.kind} {item.source_url or item.media_url}, skipping")
            return None
        return variant.url, preview_url(variant.url)

    logger.debug(f"Unknown media kind: {item.kind}")
    return None


def resolve_media(snapshot: Optional[PostSnapshot], hint: ParsedUrlHint) -> tuple[list[str], list[str]]:
    """Returns (image_urls, preview_urls) in post media order."""
    if hint.is_direct_image_url and hint.orig_image_url:
        return [hint.orig_image_url], [preview_url(hint.orig_image_url)]

    if snapshot is not None:
        image_urls = []
        preview_urls = []
        for item in snapshot.extended_media:
            resolved = _resolve_item(item)
            if resolved is None:
                continue
            image_urls.append(resolved[0])
            preview_urls.append(resolved[1])
        return image_urls, preview_urls

    if not hint.url:
        return [], []
    return [hint.url], [preview_url(hint.url)]
