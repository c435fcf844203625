"""Tweet variant generation - rule-based synthesis and orchestration."""

from tweet_studio.generation.generator import GeneratedTweet, TweetGenerator, generate_tweets
from tweet_studio.generation.variants import build_variant, derive_hashtags, truncate

__all__ = [
    "GeneratedTweet",
    "TweetGenerator",
    "generate_tweets",
    "build_variant",
    "derive_hashtags",
    "truncate",
]
