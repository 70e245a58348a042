import numpy as np
import pytest

from quixo import QuixoEnv
from quixo.core import ACTION_VECTOR_SIZE, GameResult, Move, Player, encode_move, enumerate_legal_moves


def test_reset_returns_valid_observation():
    env = QuixoEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (5, 5)
    assert obs["current_player"] == 0
    assert info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)
    assert np.count_nonzero(info["legal_action_mask"]) == ACTION_VECTOR_SIZE
    assert env.observation_space.contains(obs)


def test_legal_mask_matches_enumeration():
    env = QuixoEnv()
    env.reset()
    env.step(encode_move(Move(0, 0, 4, 0)))
    mask = env.legal_action_mask()
    legal = enumerate_legal_moves(env.state.board, Player.PLAYER_B)
    assert np.count_nonzero(mask) == len(legal)
    for move in legal:
        assert mask[encode_move(move)] == 1


def test_step_advances_state_and_returns_reward():
    env = QuixoEnv()
    obs, info = env.reset()
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert next_obs["current_player"] == 1
    assert np.any(next_obs["board"] != obs["board"])


def test_illegal_action_is_rejected():
    env = QuixoEnv()
    env.reset()
    env.step(encode_move(Move(0, 0, 4, 0)))
    with pytest.raises(ValueError):
        env.step(encode_move(Move(4, 0, 0, 0)))
    with pytest.raises(ValueError):
        env.step(ACTION_VECTOR_SIZE)


def test_ply_cap_truncates():
    env = QuixoEnv(max_ply=1)
    env.reset()
    _, reward, terminated, truncated, info = env.step(0)
    assert truncated
    assert not terminated
    assert reward == 0.0
    assert env.state.result == GameResult.DRAW
    assert not info["legal_action_mask"].any()


def test_render_ansi():
    env = QuixoEnv(render_mode="ansi")
    env.reset()
    env.step(encode_move(Move(0, 0, 4, 0)))
    assert env.render().splitlines()[0] == "....X"
