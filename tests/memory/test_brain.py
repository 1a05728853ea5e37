"""
Tests for menace.memory.brain

Tests bead initialization, weighted selection, resets and updates.
"""

import logging

import numpy as np
import pytest

from menace.games.tic_tac_toe import TicTacToe
from menace.memory.brain import Brain, BrainConfig, BrainError, DEFAULT_INITIAL_BEADS


class FixedRng:
    """Stand-in generator whose integers() always returns the same draw."""

    def __init__(self, value: int):
        self.value = value
        self.calls = []

    def integers(self, low, high, endpoint=False):
        self.calls.append((low, high, endpoint))
        return self.value


class TestBrainConfig:
    """BrainConfig validation tests."""

    def test_defaults(self):
        config = BrainConfig()
        assert config.initial_beads == DEFAULT_INITIAL_BEADS == 2
        assert config.clamp_at_zero is False

    @pytest.mark.parametrize("beads", [0, -1, 1.5, True, "2"])
    def test_rejects_bad_initial_beads(self, beads):
        """initial_beads must be a positive integer."""
        with pytest.raises(ValueError):
            BrainConfig(initial_beads=beads)


class TestNewBrain:
    """Fresh brain tests."""

    def test_empty(self, brain: Brain):
        assert len(brain) == 0
        assert brain.memory == {}
        assert brain.initial_beads == 2
        assert brain.resets == 0

    def test_config_initial_beads(self):
        assert Brain(BrainConfig(initial_beads=7)).initial_beads == 7


class TestGetMoveIndex:
    """Move selection tests."""

    def test_creates_matchbox_on_first_visit(self, brain: Brain, game: TicTacToe):
        """Unseen state gets initial_beads for every option."""
        brain.get_move_index(game)
        assert "........." in brain
        np.testing.assert_array_equal(brain.beads("........."), [2] * 9)

    def test_index_in_range(self, brain: Brain, game: TicTacToe):
        """Returned index always addresses an option."""
        game.move(5)
        for _ in range(200):
            assert 0 <= brain.get_move_index(game) < len(game.options())

    def test_existing_matchbox_reused(self, brain: Brain, game: TicTacToe):
        """A second visit does not recreate the beads."""
        brain.get_move_index(game)
        brain.memory["........."][0] = 40
        brain.get_move_index(game)
        assert brain.beads(".........")[0] == 40

    @pytest.mark.parametrize("draw, expected", [
        (1, 0), (2, 0), (3, 1), (5, 1), (6, 2), (10, 2),
    ])
    def test_weighted_walk(self, game: TicTacToe, draw, expected):
        """Draw r picks the first index where the running r - beads drops to <= 0."""
        brain = Brain(rng=FixedRng(draw))
        game = TicTacToe.from_key("xoxxoo...")  # options 7, 8, 9
        brain.memory[game.to_key()] = np.array([2, 3, 5], dtype=np.int64)

        assert brain.get_move_index(game) == expected
        assert brain.rng.calls == [(1, 10, True)]

    def test_only_weighted_option_chosen(self, brain: Brain, game: TicTacToe):
        """Options with zero beads are never drawn while others have beads."""
        brain.memory[game.to_key()] = np.array([0, 0, 0, 0, 3, 0, 0, 0, 0], dtype=np.int64)
        picks = {brain.get_move_index(game) for _ in range(100)}
        assert picks == {4}

    def test_distribution_follows_beads(self, game: TicTacToe):
        """Heavier options are picked proportionally more often."""
        brain = Brain(rng=np.random.default_rng(0))
        brain.memory[game.to_key()] = np.array([1, 0, 0, 0, 9, 0, 0, 0, 0], dtype=np.int64)
        picks = [brain.get_move_index(game) for _ in range(2000)]
        share = picks.count(4) / len(picks)
        assert 0.85 < share < 0.95


class TestReset:
    """Bead recount when a matchbox is empty."""

    def test_empty_matchbox_refilled(self, brain: Brain, game: TicTacToe, caplog):
        """All-zero beads reset to initial_beads and are reported."""
        key = game.to_key()
        brain.memory[key] = np.zeros(9, dtype=np.int64)

        with caplog.at_level(logging.WARNING, logger="menace.memory.brain"):
            index = brain.get_move_index(game)

        assert 0 <= index < 9
        np.testing.assert_array_equal(brain.beads(key), [2] * 9)
        assert brain.resets == 1
        assert f"RESET {key}" in caplog.text

    def test_reset_uses_current_initial_beads(self, game: TicTacToe):
        brain = Brain(BrainConfig(initial_beads=5), rng=np.random.default_rng(1))
        brain.memory[game.to_key()] = np.zeros(9, dtype=np.int64)
        brain.get_move_index(game)
        np.testing.assert_array_equal(brain.beads(game.to_key()), [5] * 9)

    def test_zero_sum_with_negatives_resets(self, brain: Brain, game: TicTacToe):
        """A sum of exactly zero resets even if individual beads are nonzero."""
        beads = np.array([-2, 2, 0, 0, 0, 0, 0, 0, 0], dtype=np.int64)
        brain.memory[game.to_key()] = beads
        brain.get_move_index(game)
        assert brain.resets == 1
        np.testing.assert_array_equal(brain.beads(game.to_key()), [2] * 9)

    def test_no_reset_when_beads_remain(self, brain: Brain, game: TicTacToe, caplog):
        with caplog.at_level(logging.WARNING, logger="menace.memory.brain"):
            brain.get_move_index(game)
        assert brain.resets == 0
        assert "RESET" not in caplog.text


class TestNegativeBeads:
    """Behavior of unclamped negative bead counts."""

    def test_negative_total_raises(self, brain: Brain, game: TicTacToe):
        brain.memory[game.to_key()] = np.array([-3, 1, 0, 0, 0, 0, 0, 0, 0], dtype=np.int64)
        with pytest.raises(BrainError):
            brain.get_move_index(game)

    def test_negative_bead_skews_walk(self, game: TicTacToe):
        """A negative bead shifts later options without being chosen itself."""
        brain = Brain(rng=FixedRng(1))
        game = TicTacToe.from_key("xoxxoo...")
        brain.memory[game.to_key()] = np.array([-1, 1, 2], dtype=np.int64)
        # total 2, r=1: 1-(-1)=2, 2-1=1, 1-2=-1 -> index 2
        assert brain.get_move_index(game) == 2


class TestUpdate:
    """Reward / punishment tests."""

    def test_adds_delta(self, brain: Brain, game: TicTacToe):
        brain.get_move_index(game)
        brain.update(game.to_key(), 3, 3)
        brain.update(game.to_key(), 4, -1)
        np.testing.assert_array_equal(
            brain.beads(game.to_key()), [2, 2, 2, 5, 1, 2, 2, 2, 2]
        )

    def test_unclamped_by_default(self, brain: Brain, game: TicTacToe):
        """Beads may go negative."""
        brain.get_move_index(game)
        brain.update(game.to_key(), 0, -5)
        assert brain.beads(game.to_key())[0] == -3

    def test_clamp_at_zero(self, game: TicTacToe):
        brain = Brain(BrainConfig(clamp_at_zero=True), rng=np.random.default_rng(0))
        brain.get_move_index(game)
        brain.update(game.to_key(), 0, -5)
        assert brain.beads(game.to_key())[0] == 0

    def test_unknown_state_raises(self, brain: Brain):
        with pytest.raises(KeyError):
            brain.update("not-a-state", 0, 1)

    def test_bad_index_raises(self, brain: Brain, game: TicTacToe):
        brain.get_move_index(game)
        with pytest.raises(IndexError):
            brain.update(game.to_key(), 9, 1)

    def test_length_never_changes(self, brain: Brain, game: TicTacToe):
        key = game.to_key()
        brain.get_move_index(game)
        for i in range(9):
            brain.update(key, i, -2)
        brain.get_move_index(game)
        assert len(brain.beads(key)) == 9


class TestLengthInvariance:
    """Matchbox sizes after many games."""

    def test_every_matchbox_matches_option_count(self, trained_brain: Brain):
        assert len(trained_brain) > 0
        for key, beads in trained_brain.memory.items():
            assert len(beads) == len(TicTacToe.from_key(key).options())


class TestInfo:
    """Introspection tests."""

    def test_get_info(self, brain: Brain, game: TicTacToe):
        brain.get_move_index(game)
        info = brain.get_info()
        assert info == {"states": 1, "beads": 18, "initial_beads": 2, "resets": 0}

    def test_repr(self, brain: Brain):
        assert repr(brain) == "Brain(states=0, initial_beads=2)"
