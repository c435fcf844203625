"""Storage backends for generated tweets and generation requests."""

from tweet_studio.storage.base import GenerationRequestRecord, TweetRecord, TweetStorage
from tweet_studio.storage.memory import MemoryStorage

__all__ = ["GenerationRequestRecord", "MemoryStorage", "TweetRecord", "TweetStorage"]
