import html
import re
import unicodedata
from typing import Optional

from tweet_metadata.twitter.models import PostSnapshot
from tweet_metadata.twitter.tags import hashtag_url

PROFILE_URL = "https://twitter.com/{}"

# Short links, hashtags and mentions are rewritten in one left-to-right pass,
# so replacement text is never scanned again.
ENTITY_RE = re.compile(
    r"(?P<short_url>(?i:https?://t\.co/)[a-zA-Z0-9]+)"
    r"|#(?P<hashtag>\S+)"
    r"|@(?P<mention>[a-zA-Z0-9_]+)"
)


def build_url_replacements(snapshot: PostSnapshot) -> dict[str, str]:
    """Short link -> replacement; media links map to an empty string."""
    replacements = dict(snapshot.urls)
    for item in snapshot.extended_media:
        if item.source_url:
            replacements[item.source_url] = ""
    return replacements


def dtext_link(text: str, url: str) -> str:
    return f'"{text}":[{url}]'


def format_commentary(snapshot: Optional[PostSnapshot]) -> str:
    """Converts the raw post text into DText with linked hashtags and mentions."""
    if snapshot is None or not snapshot.full_text:
        return ""

    replacements = build_url_replacements(snapshot)

    text = unicodedata.normalize("NFKC", snapshot.full_text)
    text = html.unescape(text)

    def replace_entity(match: re.Match) -> str:
        if match.group("short_url"):
            short_url = match.group("short_url")
            return replacements.get(short_url, short_url)
        if match.group("hashtag"):
            tag = match.group("hashtag")
            return dtext_link(f"#{tag}", hashtag_url(tag))
        username = match.group("mention")
        return dtext_link(f"@{username}", PROFILE_URL.format(username))

    return ENTITY_RE.sub(replace_entity, text).strip()
