"""Custom exception hierarchy for tweet-studio."""


class TweetStudioError(Exception):
    """Base exception for all tweet-studio errors."""

    status_code = 500


class ConfigError(TweetStudioError):
    """Configuration-related errors."""

    pass


class ValidationError(TweetStudioError):
    """Input or style preferences failed validation."""

    status_code = 400

    @classmethod
    def from_pydantic(cls, error) -> "ValidationError":
        """Flatten a pydantic ValidationError into a single readable message."""
        parts = []
        for item in error.errors():
            path = ".".join(str(p) for p in item.get("loc", ()))
            message = item.get("msg", "Invalid value")
            parts.append(f"{path}: {message}" if path else message)
        return cls("; ".join(parts) or "Invalid request")


class GenerationError(TweetStudioError):
    """Tweet variant synthesis failed."""

    status_code = 400


class NotFoundError(TweetStudioError):
    """A stored record was not found."""

    status_code = 404


class StorageError(TweetStudioError):
    """Storage backend errors."""

    status_code = 500
