from dataclasses import dataclass, field
from typing import Optional

PHOTO = "photo"
VIDEO = "video"
ANIMATED_GIF = "animatedGif"


@dataclass
class Author:
    id: str
    handle: str
    display_name: str


@dataclass
class MediaVariant:
    content_type: str
    url: str
    bitrate: Optional[int] = None


@dataclass
class MediaItem:
    kind: str  # photo | video | animatedGif
    media_url: str = ""
    source_url: str = ""
    variants: list[MediaVariant] = field(default_factory=list)


@dataclass
class PostSnapshot:
    id: str
    author: Author
    full_text: str = ""
    hashtags: list[str] = field(default_factory=list)
    urls: dict[str, str] = field(default_factory=dict)
    extended_media: list[MediaItem] = field(default_factory=list)


@dataclass
class ParsedUrlHint:
    url: str
    username: Optional[str] = None
    status_id: Optional[str] = None
    is_direct_image_url: bool = False
    orig_image_url: Optional[str] = None


@dataclass(frozen=True)
class NormalizedMetadata:
    image_urls: tuple[str, ...]
    preview_urls: tuple[str, ...]
    page_url: Optional[str]
    profile_url: Optional[str]
    intent_url: Optional[str]
    tag_name: str
    artist_name: str
    commentary_plain: str
    commentary_formatted: str
    tags: tuple[tuple[str, str], ...]
    canonical_source_url: Optional[str]
    profile_urls: tuple[str, ...] = ()
    commentary_title: str = ""
    artist_finder_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "image_urls": list(self.image_urls),
            "preview_urls": list(self.preview_urls),
            "page_url": self.page_url,
            "profile_url": self.profile_url,
            "profile_urls": list(self.profile_urls),
            "intent_url": self.intent_url,
            "tag_name": self.tag_name,
            "artist_name": self.artist_name,
            "artist_finder_url": self.artist_finder_url,
            "commentary_title": self.commentary_title,
            "commentary_plain": self.commentary_plain,
            "commentary_formatted": self.commentary_formatted,
            "tags": [list(tag) for tag in self.tags],
            "canonical_source_url": self.canonical_source_url,
        }
