"""Normalize tweet metadata into a catalogue-friendly form."""

from tweet_metadata.twitter.models import NormalizedMetadata, ParsedUrlHint, PostSnapshot
from tweet_metadata.twitter.source import extract, normalize

__all__ = ["NormalizedMetadata", "ParsedUrlHint", "PostSnapshot", "extract", "normalize"]
