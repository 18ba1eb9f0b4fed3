import numpy as np
import pytest

from notakto import NotaktoEnv
from notakto.core import GameResult, PlayerSide, encode_move, legal_moves, Move


def test_reset_returns_valid_observation():
    env = NotaktoEnv(number_of_boards=3, board_size=3)
    obs, info = env.reset()

    assert obs["boards"].shape == (3, 3, 3)
    assert obs["aux"].shape == (5,)
    assert obs["aux"][0] == 1.0
    assert "legal_action_mask" in info
    assert info["legal_action_mask"].shape == (27,)


def test_legal_mask_matches_enumeration():
    env = NotaktoEnv(number_of_boards=2, board_size=3)
    env.reset()
    env.step(encode_move(Move(0, 4), 3))
    mask = env.legal_action_mask()
    legal = legal_moves(env.state.boards, 3)
    assert np.count_nonzero(mask) == len(legal)
    for move in legal:
        assert mask[encode_move(move, 3)] == 1


def test_step_advances_state_and_returns_reward():
    env = NotaktoEnv()
    obs, info = env.reset()
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs["boards"] != obs["boards"])
    assert next_info["current_player"] == int(PlayerSide.TWO)


def test_killing_last_board_ends_episode():
    env = NotaktoEnv(number_of_boards=1, board_size=1)
    env.reset()
    obs, reward, terminated, truncated, info = env.step(0)

    assert terminated
    assert reward == -1.0
    assert info["result"] == GameResult.PLAYER_TWO_WIN
    assert obs["aux"][2] == 1.0
    assert not info["legal_action_mask"].any()


def test_illegal_action_rejected():
    env = NotaktoEnv(number_of_boards=1, board_size=3)
    env.reset()
    env.step(4)
    with pytest.raises(ValueError):
        env.step(4)
    with pytest.raises(ValueError):
        env.step(9)


def test_reset_reconfigures_boards():
    env = NotaktoEnv()
    obs, info = env.reset(options={"number_of_boards": 2, "board_size": 4})
    assert obs["boards"].shape == (2, 4, 4)
    assert env.action_space.n == 32
    assert info["legal_action_mask"].shape == (32,)


def test_rejected_reset_keeps_previous_configuration():
    env = NotaktoEnv(number_of_boards=2, board_size=3)
    env.reset()
    with pytest.raises(ValueError):
        env.reset(options={"board_size": 0})
    with pytest.raises(ValueError):
        env.reset(options={"number_of_boards": 0})

    assert env.action_space.n == 18
    obs, reward, terminated, truncated, info = env.step(4)
    assert obs["boards"].shape == (2, 3, 3)
    assert not terminated
    assert info["legal_action_mask"].shape == (18,)


def test_undo_and_skip():
    env = NotaktoEnv(number_of_boards=2, board_size=3)
    env.reset()
    env.step(4)
    env.step(13)
    obs, info = env.undo(2)
    assert not obs["boards"].any()
    assert info["current_player"] == int(PlayerSide.ONE)

    obs, info = env.skip()
    assert info["current_player"] == int(PlayerSide.TWO)
