"""In-memory storage living for the lifetime of the process."""

import logging
import threading
import uuid
from datetime import UTC, datetime

from tweet_studio.exceptions import StorageError
from tweet_studio.generation.generator import GeneratedTweet
from tweet_studio.models import StylePreferences
from tweet_studio.storage.base import GenerationRequestRecord, TweetRecord, TweetStorage

logger = logging.getLogger(__name__)


class MemoryStorage(TweetStorage):
    """Keeps tweets and generation requests in two dicts keyed by UUID.

    Id generation and insertion happen under a single lock so concurrent
    writers cannot collide or interleave.
    """

    def __init__(self):
        self._tweets: dict[str, TweetRecord] = {}
        self._requests: dict[str, GenerationRequestRecord] = {}
        self._lock = threading.Lock()

    def _new_id(self, table: dict) -> str:
        """Generate an id not yet used in the table. Caller holds the lock."""
        for _ in range(3):
            record_id = str(uuid.uuid4())
            if record_id not in table:
                return record_id
        raise StorageError("Failed to generate a unique id")

    def create_tweet(self, tweet: GeneratedTweet, original_input: str) -> TweetRecord:
        with self._lock:
            record = TweetRecord.from_generated(self._new_id(self._tweets), tweet, original_input)
            self._tweets[record.id] = record
        logger.debug(f"Stored tweet {record.id}")
        return record

    def get_tweets_by_input(self, original_input: str) -> list[TweetRecord]:
        with self._lock:
            return [t for t in self._tweets.values() if t.original_input == original_input]

    def create_generation_request(
        self,
        input: str,
        preferences: StylePreferences,
        generated_tweets: list[GeneratedTweet],
    ) -> GenerationRequestRecord:
        with self._lock:
            record = GenerationRequestRecord(
                id=self._new_id(self._requests),
                input=input,
                preferences=preferences,
                generated_tweets=tuple(generated_tweets),
                created_at=datetime.now(UTC).isoformat(),
            )
            self._requests[record.id] = record
        logger.debug(f"Stored generation request {record.id}")
        return record

    def get_generation_request(self, request_id: str) -> GenerationRequestRecord | None:
        with self._lock:
            return self._requests.get(request_id)
