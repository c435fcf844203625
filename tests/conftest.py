"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from tweet_studio.models import LengthMode, StylePreferences, Tone


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample config file."""
    config_path = temp_dir / "config.yaml"
    config_path.write_text("""
server:
  host: "0.0.0.0"
  port: 8080

generation:
  seed: 7
  defaults:
    tone: professional
    includeEmojis: false
    length: concise
    includeHashtags: false
    addCallToAction: true
    includeQuestions: false
""")
    return config_path


@pytest.fixture
def plain_preferences():
    """Professional, concise, no decorations."""
    return StylePreferences(
        tone=Tone.PROFESSIONAL,
        include_emojis=False,
        length=LengthMode.CONCISE,
        include_hashtags=False,
        add_call_to_action=False,
        include_questions=False,
    )


class FixedChoice:
    """Random source that always picks the item at a fixed index."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return seq[self.index]


@pytest.fixture
def fixed_choice():
    return FixedChoice(index=1)
