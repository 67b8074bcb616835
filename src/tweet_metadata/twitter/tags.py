import re
from typing import NamedTuple, Optional

from tweet_metadata.twitter.models import PostSnapshot

HASHTAG_URL = "https://twitter.com/hashtag/{}"


class TagSuffixRule(NamedTuple):
    pattern: re.Pattern
    # Characters that must survive in front of the suffix.
    min_prefix: int = 1


# Event hashtags are often "<tag><suffix>", e.g. 西住みほ生誕祭2019 is a
# birthday tag for 西住みほ. Longer suffixes come before the shorter ones
# they contain.
TAG_SUFFIX_RULES = [
    TagSuffixRule(re.compile(r"生誕祭[0-9]*\Z")),
    TagSuffixRule(re.compile(r"誕生祭[0-9]*\Z")),
    TagSuffixRule(re.compile(r"版もうひとつの深夜の真剣お絵描き60分一本勝負(?:_[0-9]+)?\Z")),
    TagSuffixRule(re.compile(r"版深夜の真剣お絵描き60分一本勝負(?:_[0-9]+)?\Z")),
    TagSuffixRule(re.compile(r"版深夜の真剣お絵かき60分一本勝負(?:_[0-9]+)?\Z")),
    TagSuffixRule(re.compile(r"深夜の真剣お絵描き60分一本勝負(?:_[0-9]+)?\Z")),
    TagSuffixRule(re.compile(r"版深夜のお絵描き60分一本勝負(?:_[0-9]+)?\Z")),
    TagSuffixRule(re.compile(r"版真剣お絵描き60分一本勝(?:_[0-9]+)?\Z")),
    TagSuffixRule(re.compile(r"版お絵描き60分一本勝負(?:_[0-9]+)?\Z")),
]


def normalize_tag(tag: str) -> str:
    """Strips the first known event suffix from a hashtag."""
    for rule in TAG_SUFFIX_RULES:
        match = rule.pattern.search(tag, rule.min_prefix)
        if match:
            return tag[:match.start()]
    return tag


def hashtag_url(tag: str) -> str:
    return HASHTAG_URL.format(tag)


def extract_tags(snapshot: Optional[PostSnapshot]) -> list[tuple[str, str]]:
    if snapshot is None:
        return []
    return [(tag, hashtag_url(tag)) for tag in snapshot.hashtags]
