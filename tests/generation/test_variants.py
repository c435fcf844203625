"""Tests for single-variant text synthesis."""

import pytest

from tweet_studio.generation.variants import (
    CALLS_TO_ACTION,
    EMOJI_PREFIXES,
    EXPANDED_TEMPLATES,
    BASE_TEMPLATES,
    build_variant,
    derive_hashtags,
    truncate,
)
from tweet_studio.models import LengthMode, Tone, VariantKind


def prefs(base, **changes):
    return base.model_copy(update=changes)


class TestBasePhrasing:
    """Tests for the opening sentence of each variant."""

    def test_direct_professional(self, plain_preferences):
        content = build_variant("Artificial intelligence", plain_preferences, VariantKind.DIRECT)
        assert content == "Artificial intelligence."
        assert len(content) == 24

    def test_direct_autonomous(self, plain_preferences):
        p = prefs(plain_preferences, tone=Tone.AUTONOMOUS)
        assert build_variant("Ship it", p, VariantKind.DIRECT) == "Ship it!"

    def test_input_is_trimmed(self, plain_preferences):
        assert build_variant("  Ship it \n", plain_preferences, VariantKind.DIRECT) == "Ship it."

    def test_engaging_statement_lowercases_input(self, plain_preferences):
        content = build_variant("Quantum Computing", plain_preferences, VariantKind.ENGAGING)
        assert content == "Exploring the impact of quantum computing."

        p = prefs(plain_preferences, tone=Tone.AUTONOMOUS)
        content = build_variant("Quantum Computing", p, VariantKind.ENGAGING)
        assert content == "Diving deep into quantum computing..."

    def test_engaging_question(self, plain_preferences):
        p = prefs(plain_preferences, include_questions=True)
        content = build_variant("Remote Work", p, VariantKind.ENGAGING)
        assert content == "Thoughts on remote work? Let's discuss."

        p = prefs(p, tone=Tone.AUTONOMOUS)
        content = build_variant("Remote Work", p, VariantKind.ENGAGING)
        assert content == "What do you think about remote work? 🤔"

    def test_questions_only_affect_engaging(self, plain_preferences):
        p = prefs(plain_preferences, include_questions=True)
        assert build_variant("Remote Work", p, VariantKind.DIRECT) == "Remote Work."
        assert build_variant("Remote Work", p, VariantKind.INFORMATIVE) == "Key insight: Remote Work."

    def test_informative(self, plain_preferences):
        assert (
            build_variant("Rust Adoption", plain_preferences, VariantKind.INFORMATIVE)
            == "Key insight: Rust Adoption."
        )
        p = prefs(plain_preferences, tone=Tone.AUTONOMOUS)
        assert (
            build_variant("Rust Adoption", p, VariantKind.INFORMATIVE)
            == "Here's the thing about rust adoption:"
        )

    def test_braces_in_input_are_literal(self, plain_preferences):
        assert build_variant("{clean} {0}", plain_preferences, VariantKind.DIRECT) == "{clean} {0}."


class TestLengthExpansion:
    """Tests for the expanded template swap."""

    def test_expanded_replaces_short_text(self, plain_preferences):
        p = prefs(plain_preferences, tone=Tone.AUTONOMOUS, length=LengthMode.EXPANDED)
        content = build_variant("Artificial intelligence", p, VariantKind.DIRECT)
        assert content == "Breaking: Artificial intelligence! This is huge and here's why it matters."

    def test_expanded_engaging_professional(self, plain_preferences):
        p = prefs(plain_preferences, length=LengthMode.EXPANDED)
        content = build_variant("Edge AI", p, VariantKind.ENGAGING)
        assert content == (
            "I've been analyzing edge ai and the implications are fascinating. "
            "What are your thoughts on this development?"
        )

    def test_expanded_keeps_long_base_text(self, plain_preferences):
        text = "a" * 120
        p = prefs(plain_preferences, length=LengthMode.EXPANDED)
        assert build_variant(text, p, VariantKind.DIRECT) == text + "."

    def test_threshold_is_exclusive(self, plain_preferences):
        # "x" * 99 + "." is exactly 100 characters, so no expansion
        text = "x" * 99
        p = prefs(plain_preferences, length=LengthMode.EXPANDED)
        assert build_variant(text, p, VariantKind.DIRECT) == text + "."

        # 99 characters still expands
        text = "x" * 98
        content = build_variant(text, p, VariantKind.DIRECT)
        assert content.startswith("Important update: ")

    def test_concise_never_expands(self, plain_preferences):
        assert build_variant("AI", plain_preferences, VariantKind.INFORMATIVE) == "Key insight: AI."

    def test_every_combination_has_a_template(self):
        for kind in VariantKind:
            for tone in Tone:
                assert (kind, tone) in BASE_TEMPLATES
                assert (kind, tone) in EXPANDED_TEMPLATES
                assert (kind, tone) in EMOJI_PREFIXES


class TestEmojiPrefix:
    """Tests for the emoji lookup."""

    def test_direct_professional_emoji(self, plain_preferences):
        p = prefs(plain_preferences, include_emojis=True)
        assert build_variant("Artificial intelligence", p, VariantKind.DIRECT) == (
            "📊 Artificial intelligence."
        )

    def test_direct_autonomous_emoji_differs(self, plain_preferences):
        p = prefs(plain_preferences, include_emojis=True, tone=Tone.AUTONOMOUS)
        assert build_variant("Artificial intelligence", p, VariantKind.DIRECT).startswith("🚀 ")

    def test_all_six_emojis_distinct(self):
        assert len(set(EMOJI_PREFIXES.values())) == 6

    def test_emoji_is_stable(self, plain_preferences):
        for kind in VariantKind:
            for tone in Tone:
                p = prefs(plain_preferences, include_emojis=True, tone=tone)
                first = build_variant("Topic", p, kind)
                second = build_variant("Topic", p, kind)
                assert first == second
                assert first.startswith(EMOJI_PREFIXES[(kind, tone)] + " ")

    def test_emoji_applied_after_expansion(self, plain_preferences):
        p = prefs(plain_preferences, include_emojis=True, length=LengthMode.EXPANDED)
        content = build_variant("Rust", p, VariantKind.INFORMATIVE)
        assert content == (
            "📝 Research shows that rust is becoming increasingly important. "
            "Here's what you need to know."
        )


class TestHashtags:
    """Tests for hashtag derivation."""

    def test_short_words_dropped(self):
        assert derive_hashtags("AI robots are here") == ["#Robots"]

    def test_first_two_words_only(self):
        assert derive_hashtags("machine learning models rock") == ["#Machine", "#Learning"]

    def test_punctuation_stripped_and_case_normalized(self):
        assert derive_hashtags("NEXT.js, TypeScript!") == ["#Nextjs", "#Typescript"]

    def test_non_ascii_letters_stripped(self):
        assert derive_hashtags("café culture") == ["#Caf", "#Culture"]

    def test_no_survivors(self):
        assert derive_hashtags("a an") == []

    def test_appended_with_single_space(self, plain_preferences):
        p = prefs(plain_preferences, include_hashtags=True)
        assert build_variant("Machine learning", p, VariantKind.DIRECT) == (
            "Machine learning. #Machine #Learning"
        )

    def test_no_hashtags_leaves_text_unchanged(self, plain_preferences):
        p = prefs(plain_preferences, include_hashtags=True)
        assert build_variant("Go to it", p, VariantKind.DIRECT) == "Go to it."


class TestCallToAction:
    """Tests for the call-to-action suffix."""

    def test_pinned_choice(self, plain_preferences, fixed_choice):
        p = prefs(plain_preferences, add_call_to_action=True)
        content = build_variant("Remote work", p, VariantKind.DIRECT, rng=fixed_choice)
        assert content == "Remote work. What's your take?"
        assert fixed_choice.calls == 1

    def test_autonomous_list(self, plain_preferences, fixed_choice):
        p = prefs(plain_preferences, add_call_to_action=True, tone=Tone.AUTONOMOUS)
        content = build_variant("Remote work", p, VariantKind.DIRECT, rng=fixed_choice)
        assert content == "Remote work! What do you think?"

    def test_unpinned_choice_comes_from_tone_list(self, plain_preferences):
        p = prefs(plain_preferences, add_call_to_action=True)
        for _ in range(20):
            content = build_variant("Remote work", p, VariantKind.DIRECT)
            suffix = content.removeprefix("Remote work. ")
            assert suffix in CALLS_TO_ACTION[Tone.PROFESSIONAL]

    def test_cta_follows_hashtags(self, plain_preferences, fixed_choice):
        p = prefs(plain_preferences, add_call_to_action=True, include_hashtags=True)
        content = build_variant("Remote work", p, VariantKind.DIRECT, rng=fixed_choice)
        assert content == "Remote work. #Remote #Work What's your take?"


class TestTruncation:
    """Tests for the 280 character ceiling."""

    def test_truncate_short_text_untouched(self):
        assert truncate("hello") == "hello"

    def test_truncate_exact_limit_untouched(self):
        text = "x" * 280
        assert truncate(text) == text

    def test_truncate_long_text(self):
        text = "y" * 281
        result = truncate(text)
        assert len(result) == 280
        assert result.endswith("...")
        assert result[:277] == text[:277]

    def test_long_input_truncated(self, plain_preferences):
        text = "word " * 80
        candidate = text.strip() + "."
        content = build_variant(text, plain_preferences, VariantKind.DIRECT)
        assert len(candidate) > 280
        assert len(content) == 280
        assert content.endswith("...")
        assert content[:277] == candidate[:277]

    @pytest.mark.parametrize("kind", list(VariantKind))
    def test_fully_decorated_long_input_within_limit(self, plain_preferences, fixed_choice, kind):
        p = prefs(
            plain_preferences,
            include_emojis=True,
            include_hashtags=True,
            add_call_to_action=True,
            length=LengthMode.EXPANDED,
        )
        content = build_variant("Extraordinary " * 30, p, kind, rng=fixed_choice)
        assert len(content) == 280
