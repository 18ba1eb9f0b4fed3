import numpy as np
import pytest

from notakto.agents import MinimaxPolicy, RandomPolicy, select_action
from notakto.core import Move, apply_move, encode_move, initialize_game_state


def test_random_policy_uniform_over_legal():
    policy = RandomPolicy(np.random.default_rng(0))
    state = initialize_game_state(1, 3)
    mask = np.zeros(9, dtype=np.int8)
    mask[[1, 4, 7]] = 1
    probs = policy.act(state, mask)
    assert np.isclose(probs.sum(), 1.0)
    assert np.allclose(probs[[1, 4, 7]], 1.0 / 3.0)
    assert probs[0] == 0.0


def test_minimax_policy_is_one_hot_on_legal_move():
    state = initialize_game_state(2, 3)
    state = apply_move(state, Move(0, 4))
    mask = np.ones(18, dtype=np.int8)
    mask[encode_move(Move(0, 4), 3)] = 0

    probs = MinimaxPolicy(difficulty=1, rng=np.random.default_rng(0)).act(state, mask)
    assert probs.sum() == 1.0
    assert mask[int(np.argmax(probs))] == 1


def test_spawned_policies_are_independent():
    policy = MinimaxPolicy(difficulty=2)
    child = policy.spawn(seed=5)
    assert child is not policy
    assert child.difficulty == 2


def test_select_action_greedy_and_sampled():
    probs = np.array([0.1, 0.7, 0.2], dtype=np.float32)
    assert select_action(probs, 0.0, np.random.default_rng(0)) == 1
    assert select_action(probs, 1.0, np.random.default_rng(0)) in (0, 1, 2)
    with pytest.raises(ValueError):
        select_action(np.zeros(3), 1.0, np.random.default_rng(0))
