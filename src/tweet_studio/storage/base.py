"""Storage interface and persisted record types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from tweet_studio.generation.generator import GeneratedTweet
from tweet_studio.models import StylePreferences


@dataclass(frozen=True)
class TweetRecord:
    """A stored tweet, with its style flattened alongside the original input."""

    id: str
    content: str
    character_count: int
    tone: str
    include_emojis: bool
    length: str
    include_hashtags: bool
    add_call_to_action: bool
    include_questions: bool
    original_input: str

    @classmethod
    def from_generated(
        cls, record_id: str, tweet: GeneratedTweet, original_input: str
    ) -> "TweetRecord":
        style = tweet.style
        return cls(
            id=record_id,
            content=tweet.content,
            character_count=tweet.character_count,
            tone=style.tone.value,
            include_emojis=style.include_emojis,
            length=style.length.value,
            include_hashtags=style.include_hashtags,
            add_call_to_action=style.add_call_to_action,
            include_questions=style.include_questions,
            original_input=original_input,
        )

    @property
    def style(self) -> StylePreferences:
        return StylePreferences(
            tone=self.tone,
            include_emojis=self.include_emojis,
            length=self.length,
            include_hashtags=self.include_hashtags,
            add_call_to_action=self.add_call_to_action,
            include_questions=self.include_questions,
        )

    def to_generated_tweet(self) -> GeneratedTweet:
        return GeneratedTweet(
            content=self.content,
            character_count=self.character_count,
            style=self.style,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "characterCount": self.character_count,
            "tone": self.tone,
            "includeEmojis": self.include_emojis,
            "length": self.length,
            "includeHashtags": self.include_hashtags,
            "addCallToAction": self.add_call_to_action,
            "includeQuestions": self.include_questions,
            "originalInput": self.original_input,
        }


@dataclass(frozen=True)
class GenerationRequestRecord:
    """A stored generation request and the tweets it produced."""

    id: str
    input: str
    preferences: StylePreferences
    generated_tweets: tuple[GeneratedTweet, ...] = field(default_factory=tuple)
    created_at: str = ""  # ISO format

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "input": self.input,
            "preferences": self.preferences.to_dict(),
            "generatedTweets": [t.to_dict() for t in self.generated_tweets],
            "createdAt": self.created_at,
        }


class TweetStorage(ABC):
    """Abstract base class for tweet storage backends."""

    @abstractmethod
    def create_tweet(self, tweet: GeneratedTweet, original_input: str) -> TweetRecord:
        """Store a generated tweet under a new unique id.

        Args:
            tweet: The generated tweet to store
            original_input: The text the tweet was generated from

        Returns:
            The stored TweetRecord
        """
        pass

    @abstractmethod
    def get_tweets_by_input(self, original_input: str) -> list[TweetRecord]:
        """Return stored tweets whose original input matches exactly."""
        pass

    @abstractmethod
    def create_generation_request(
        self,
        input: str,
        preferences: StylePreferences,
        generated_tweets: list[GeneratedTweet],
    ) -> GenerationRequestRecord:
        """Store a generation request under a new unique id."""
        pass

    @abstractmethod
    def get_generation_request(self, request_id: str) -> GenerationRequestRecord | None:
        """Look up a generation request by id, or None if absent."""
        pass
