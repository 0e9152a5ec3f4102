"""Shared fixtures for Phylang tests."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phylang import CulturalProfile, Geography, build_genome, new_language


def make_profile(agreeableness=3.0, openness=3.0, conscientiousness=3.0,
                 extraversion=3.0, honesty_humility=3.0, emotionality=3.0):
    return CulturalProfile(agreeableness, openness, conscientiousness,
                           extraversion, honesty_humility, emotionality)


@pytest.fixture
def coastal_profile():
    """The (4, 3, 2, 3, 3, 4) coastal culture."""
    return CulturalProfile(4.0, 3.0, 2.0, 3.0, 3.0, 4.0)


@pytest.fixture
def coastal_genome(coastal_profile):
    return build_genome(coastal_profile, Geography.COASTAL)


@pytest.fixture
def coastal_lang(coastal_profile):
    return new_language(coastal_profile, Geography.COASTAL, 12345)


@pytest.fixture
def plains_lang():
    return new_language(make_profile(), Geography.PLAINS, 777)
