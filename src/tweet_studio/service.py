"""Generation service: validate, generate, persist."""

import logging
from dataclasses import dataclass
from typing import Any

from tweet_studio.exceptions import NotFoundError, StorageError, TweetStudioError
from tweet_studio.generation.generator import GeneratedTweet, TweetGenerator
from tweet_studio.models import StylePreferences, parse_generate_request
from tweet_studio.storage.base import GenerationRequestRecord, TweetRecord, TweetStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a successful generation request."""

    tweets: list[GeneratedTweet]
    request_id: str
    saved_tweets: list[TweetRecord]


class GenerationService:
    """Runs the generator and records its output in storage."""

    def __init__(self, storage: TweetStorage, generator: TweetGenerator | None = None):
        self.storage = storage
        self.generator = generator or TweetGenerator()

    def generate(self, input: str, preferences: StylePreferences) -> GenerationResult:
        """Generate three variants and persist the request and each tweet.

        Raises:
            GenerationError: If synthesis fails
            StorageError: If the results could not be stored
        """
        tweets = self.generator.generate(input, preferences)

        try:
            # A request record exists only if all of its tweets were stored
            saved = [self.storage.create_tweet(tweet, input) for tweet in tweets]
            request = self.storage.create_generation_request(input, preferences, tweets)
        except TweetStudioError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to store generated tweets: {e}") from e

        logger.info(f"Generation request {request.id} stored with {len(saved)} tweets")
        return GenerationResult(tweets=tweets, request_id=request.id, saved_tweets=saved)

    def generate_from_payload(self, payload: Any) -> GenerationResult:
        """Validate a raw request body, then generate.

        Raises:
            ValidationError: If the body does not match the request schema
        """
        request = parse_generate_request(payload)
        return self.generate(request.input, request.preferences)

    def get_tweets_by_input(self, input: str) -> list[TweetRecord]:
        try:
            return self.storage.get_tweets_by_input(input)
        except TweetStudioError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to retrieve tweets: {e}") from e

    def get_generation_request(self, request_id: str) -> GenerationRequestRecord:
        """Look up a generation request.

        Raises:
            NotFoundError: If no request has this id
        """
        try:
            request = self.storage.get_generation_request(request_id)
        except TweetStudioError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to retrieve generation request: {e}") from e

        if request is None:
            raise NotFoundError("Generation request not found")
        return request
