"""Style preference schema and request validation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from tweet_studio.exceptions import ValidationError

# Hard ceiling for any generated tweet
MAX_TWEET_LENGTH = 280


class Tone(str, Enum):
    """Formality of the generated text."""

    PROFESSIONAL = "professional"
    AUTONOMOUS = "autonomous"


class LengthMode(str, Enum):
    """Whether short base phrasings get swapped for longer templates."""

    CONCISE = "concise"
    EXPANDED = "expanded"


class VariantKind(str, Enum):
    """The three variant slots produced per request, in display order."""

    DIRECT = "direct"
    ENGAGING = "engaging"
    INFORMATIVE = "informative"


VARIANT_ORDER: tuple[VariantKind, ...] = (
    VariantKind.DIRECT,
    VariantKind.ENGAGING,
    VariantKind.INFORMATIVE,
)


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class StylePreferences(CamelModel):
    """The six toggles that drive variant synthesis."""

    tone: Tone
    include_emojis: StrictBool
    length: LengthMode
    include_hashtags: StrictBool
    add_call_to_action: StrictBool
    include_questions: StrictBool

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class GenerateTweetsRequest(CamelModel):
    """Body of a tweet generation request."""

    input: StrictStr
    preferences: StylePreferences

    @field_validator("input")
    @classmethod
    def _input_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("input_required", "Input is required")
        return value


class PreferenceOverrides(BaseModel):
    """Partial preferences; unset fields fall back to configured defaults.

    Booleans are parsed leniently so values interpolated from the
    environment ("false", "1") are accepted.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    tone: Tone | None = None
    include_emojis: bool | None = None
    length: LengthMode | None = None
    include_hashtags: bool | None = None
    add_call_to_action: bool | None = None
    include_questions: bool | None = None

    def apply(self, defaults: StylePreferences) -> StylePreferences:
        updates = self.model_dump(exclude_none=True)
        return defaults.model_copy(update=updates)


def parse_generate_request(payload: Any) -> GenerateTweetsRequest:
    """Validate a raw request payload.

    Raises:
        ValidationError: If the input is empty or a preference is out of range
    """
    try:
        return GenerateTweetsRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


DEFAULT_PREFERENCES = StylePreferences(
    tone=Tone.AUTONOMOUS,
    include_emojis=True,
    length=LengthMode.EXPANDED,
    include_hashtags=True,
    add_call_to_action=False,
    include_questions=False,
)
