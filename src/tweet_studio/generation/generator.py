"""Tweet generator producing one variant per kind."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from tweet_studio.exceptions import GenerationError
from tweet_studio.generation.variants import build_variant
from tweet_studio.models import VARIANT_ORDER, StylePreferences, VariantKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedTweet:
    """A generated tweet variant."""

    content: str
    character_count: int
    style: StylePreferences
    kind: VariantKind | None = field(default=None, compare=False)

    @classmethod
    def create(
        cls,
        content: str,
        style: StylePreferences,
        kind: VariantKind | None = None,
    ) -> "GeneratedTweet":
        return cls(content=content, character_count=len(content), style=style, kind=kind)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "characterCount": self.character_count,
            "style": self.style.to_dict(),
        }


class TweetGenerator:
    """Generates the direct, engaging and informative variants for an input."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng

    def generate_variant(
        self, text: str, preferences: StylePreferences, kind: VariantKind
    ) -> GeneratedTweet:
        """Generate a single variant."""
        content = build_variant(text, preferences, kind, rng=self.rng)
        return GeneratedTweet.create(content, preferences, kind)

    def generate(self, text: str, preferences: StylePreferences) -> list[GeneratedTweet]:
        """Generate all three variants in display order.

        Returns:
            Exactly three GeneratedTweets: direct, engaging, informative

        Raises:
            GenerationError: If any variant fails; no partial list is returned
        """
        try:
            tweets = [self.generate_variant(text, preferences, kind) for kind in VARIANT_ORDER]
        except Exception as e:
            logger.error(f"Tweet generation error: {e}")
            raise GenerationError(f"Failed to generate tweets: {e}") from e

        logger.debug(f"Generated {len(tweets)} variants for input of {len(text)} chars")
        return tweets


def generate_tweets(
    text: str,
    preferences: StylePreferences,
    rng: random.Random | None = None,
) -> list[GeneratedTweet]:
    """Generate the three tweet variants for an input."""
    return TweetGenerator(rng).generate(text, preferences)
