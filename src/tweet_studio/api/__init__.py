"""HTTP API for tweet generation."""

from tweet_studio.api.app import create_app

__all__ = ["create_app"]
