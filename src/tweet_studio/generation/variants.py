"""Rule-based text synthesis for a single tweet variant.

Each variant is built in a fixed sequence of steps: base phrasing, length
expansion, emoji prefix, hashtag suffix, call-to-action suffix and finally
truncation to the 280 character ceiling. The only non-deterministic step is
the call-to-action pick, which draws from an injectable random source.
"""

import random
import re

from tweet_studio.models import (
    MAX_TWEET_LENGTH,
    LengthMode,
    StylePreferences,
    Tone,
    VariantKind,
)

ELLIPSIS = "..."

# Expanded templates only replace base text shorter than this
EXPANSION_THRESHOLD = 100

MAX_HASHTAGS = 2
MIN_HASHTAG_WORD_LENGTH = 3

# Templates receive {clean} (trimmed input) and {lower} (lower-cased copy)
BASE_TEMPLATES: dict[tuple[VariantKind, Tone], str] = {
    (VariantKind.DIRECT, Tone.PROFESSIONAL): "{clean}.",
    (VariantKind.DIRECT, Tone.AUTONOMOUS): "{clean}!",
    (VariantKind.ENGAGING, Tone.PROFESSIONAL): "Exploring the impact of {lower}.",
    (VariantKind.ENGAGING, Tone.AUTONOMOUS): "Diving deep into {lower}...",
    (VariantKind.INFORMATIVE, Tone.PROFESSIONAL): "Key insight: {clean}.",
    (VariantKind.INFORMATIVE, Tone.AUTONOMOUS): "Here's the thing about {lower}:",
}

# Used instead of the engaging base template when questions are requested
QUESTION_TEMPLATES: dict[Tone, str] = {
    Tone.PROFESSIONAL: "Thoughts on {lower}? Let's discuss.",
    Tone.AUTONOMOUS: "What do you think about {lower}? 🤔",
}

EXPANDED_TEMPLATES: dict[tuple[VariantKind, Tone], str] = {
    (VariantKind.DIRECT, Tone.PROFESSIONAL): (
        "Important update: {clean}. This development represents a significant step forward."
    ),
    (VariantKind.DIRECT, Tone.AUTONOMOUS): (
        "Breaking: {clean}! This is huge and here's why it matters."
    ),
    (VariantKind.ENGAGING, Tone.PROFESSIONAL): (
        "I've been analyzing {lower} and the implications are fascinating. "
        "What are your thoughts on this development?"
    ),
    (VariantKind.ENGAGING, Tone.AUTONOMOUS): (
        "Can we talk about {lower}? This is blowing my mind and I need to share why!"
    ),
    (VariantKind.INFORMATIVE, Tone.PROFESSIONAL): (
        "Research shows that {lower} is becoming increasingly important. "
        "Here's what you need to know."
    ),
    (VariantKind.INFORMATIVE, Tone.AUTONOMOUS): (
        "Everything you need to know about {lower}: "
        "it's changing the game in ways you might not expect."
    ),
}

EMOJI_PREFIXES: dict[tuple[VariantKind, Tone], str] = {
    (VariantKind.DIRECT, Tone.PROFESSIONAL): "📊",
    (VariantKind.DIRECT, Tone.AUTONOMOUS): "🚀",
    (VariantKind.ENGAGING, Tone.PROFESSIONAL): "💡",
    (VariantKind.ENGAGING, Tone.AUTONOMOUS): "🔥",
    (VariantKind.INFORMATIVE, Tone.PROFESSIONAL): "📝",
    (VariantKind.INFORMATIVE, Tone.AUTONOMOUS): "💭",
}

CALLS_TO_ACTION: dict[Tone, tuple[str, ...]] = {
    Tone.PROFESSIONAL: (
        "Share your thoughts below.",
        "What's your take?",
        "Join the discussion.",
    ),
    Tone.AUTONOMOUS: (
        "Drop your thoughts! 👇",
        "What do you think?",
        "Let me know! ⬇️",
    ),
}

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def base_phrasing(clean: str, preferences: StylePreferences, kind: VariantKind) -> str:
    """Pick the opening sentence for a variant."""
    tone = Tone(preferences.tone)
    if kind is VariantKind.ENGAGING and preferences.include_questions:
        template = QUESTION_TEMPLATES[tone]
    else:
        template = BASE_TEMPLATES[(kind, tone)]
    return template.format(clean=clean, lower=clean.lower())


def expand(text: str, clean: str, preferences: StylePreferences, kind: VariantKind) -> str:
    """Swap short text for the longer template when expanded mode is on."""
    if preferences.length != LengthMode.EXPANDED or len(text) >= EXPANSION_THRESHOLD:
        return text
    template = EXPANDED_TEMPLATES[(kind, Tone(preferences.tone))]
    return template.format(clean=clean, lower=clean.lower())


def derive_hashtags(clean: str) -> list[str]:
    """Build up to two hashtags from the first two words of the input.

    Words are stripped to ASCII letters and digits; anything of two
    characters or fewer is dropped.
    """
    hashtags = []
    for word in clean.split()[:2]:
        word = _NON_ALPHANUMERIC.sub("", word)
        if len(word) < MIN_HASHTAG_WORD_LENGTH:
            continue
        hashtags.append(f"#{word[0].upper()}{word[1:].lower()}")
    return hashtags[:MAX_HASHTAGS]


def pick_call_to_action(tone: Tone, rng: random.Random | None = None) -> str:
    """Choose one call-to-action phrase for the tone."""
    chooser = rng or random
    return chooser.choice(CALLS_TO_ACTION[Tone(tone)])


def truncate(text: str, limit: int = MAX_TWEET_LENGTH) -> str:
    """Cut text to the limit, ending with an ellipsis when shortened."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def build_variant(
    text: str,
    preferences: StylePreferences,
    kind: VariantKind,
    rng: random.Random | None = None,
) -> str:
    """Produce the final text for one variant kind.

    Args:
        text: Free-text topic; must not be blank
        preferences: Style toggles
        kind: Which of the three variant slots to build
        rng: Random source for the call-to-action pick

    Returns:
        Tweet text no longer than 280 characters
    """
    kind = VariantKind(kind)
    tone = Tone(preferences.tone)
    clean = text.strip()

    content = base_phrasing(clean, preferences, kind)
    content = expand(content, clean, preferences, kind)

    if preferences.include_emojis:
        content = f"{EMOJI_PREFIXES[(kind, tone)]} {content}"

    if preferences.include_hashtags:
        hashtags = derive_hashtags(clean)
        if hashtags:
            content += f" {' '.join(hashtags)}"

    if preferences.add_call_to_action:
        content += f" {pick_call_to_action(tone, rng)}"

    return truncate(content)
