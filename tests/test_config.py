"""
Unit Tests for Configuration

Tests for Difficulty parsing, SearchConfig validation and defaults,
and UCIConfig wait computation.
"""

import dataclasses

import pytest

from chess_ai.config import (
    DEFAULT_DEPTHS,
    DEFAULT_TIME_LIMITS_MS,
    Difficulty,
    SearchConfig,
    UCIConfig,
)


class TestDifficulty:
    """Tests for Difficulty enum."""

    def test_parse_names(self):
        assert Difficulty.parse("easy") == Difficulty.EASY
        assert Difficulty.parse("Medium") == Difficulty.MEDIUM
        assert Difficulty.parse(" HARD ") == Difficulty.HARD

    def test_parse_passthrough(self):
        assert Difficulty.parse(Difficulty.HARD) is Difficulty.HARD

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown difficulty"):
            Difficulty.parse("grandmaster")


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults_are_medium(self):
        config = SearchConfig()

        assert config.difficulty == Difficulty.MEDIUM
        assert config.depth == 3
        assert config.time_limit_ms == 800

    @pytest.mark.parametrize(
        "tier, depth, time_limit_ms",
        [("easy", 2, 400), ("medium", 3, 800), ("hard", 4, 1500)],
    )
    def test_for_difficulty(self, tier, depth, time_limit_ms):
        config = SearchConfig.for_difficulty(tier)

        assert config.difficulty == Difficulty.parse(tier)
        assert config.depth == depth
        assert config.time_limit_ms == time_limit_ms

    def test_default_maps_cover_every_tier(self):
        assert set(DEFAULT_DEPTHS) == set(Difficulty)
        assert set(DEFAULT_TIME_LIMITS_MS) == set(Difficulty)

    def test_string_difficulty_is_converted(self):
        config = SearchConfig(depth=2, difficulty="hard", time_limit_ms=100)

        assert config.difficulty is Difficulty.HARD

    @pytest.mark.parametrize("depth", [0, -1, 2.5, True])
    def test_invalid_depth_raises(self, depth):
        with pytest.raises(ValueError, match="depth"):
            SearchConfig(depth=depth)

    @pytest.mark.parametrize("time_limit_ms", [0, -100, 1.5])
    def test_invalid_time_limit_raises(self, time_limit_ms):
        with pytest.raises(ValueError, match="time_limit_ms"):
            SearchConfig(time_limit_ms=time_limit_ms)

    def test_is_immutable(self):
        config = SearchConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.depth = 5

    def test_replace_returns_new_validated_config(self):
        config = SearchConfig.for_difficulty("easy")

        harder = config.replace(difficulty="hard", depth=5)

        assert harder.difficulty == Difficulty.HARD
        assert harder.depth == 5
        assert harder.time_limit_ms == config.time_limit_ms
        assert config.difficulty == Difficulty.EASY, "Original must be unchanged"

        with pytest.raises(ValueError):
            config.replace(depth=0)


class TestUCIConfig:
    """Tests for UCIConfig."""

    def test_movetime_and_skill_per_tier(self):
        config = UCIConfig()

        assert config.movetime_ms("easy") == 40
        assert config.movetime_ms("medium") == 80
        assert config.movetime_ms("hard") == 160
        assert config.skill_level("easy") == 1
        assert config.skill_level("medium") == 5
        assert config.skill_level("hard") == 10

    def test_wait_adds_grace_period(self):
        config = UCIConfig()

        assert config.wait_ms("hard") == 160 + 900
        assert config.wait_ms("easy") == 40 + 900

    def test_wait_has_lower_bound(self):
        config = UCIConfig(grace_ms=0, min_wait_ms=300)

        assert config.wait_ms("easy") == 300

    def test_negative_values_raise(self):
        with pytest.raises(ValueError):
            UCIConfig(grace_ms=-1)
        with pytest.raises(ValueError):
            UCIConfig(min_wait_ms=-1)
