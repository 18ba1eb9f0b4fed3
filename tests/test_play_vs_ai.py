import json
from pathlib import Path

from notakto.core import Move, PlayerSide, encode_move

from scripts.play_vs_ai import is_human_turn, main, replay_logged_game


def create_sample_log(path: Path) -> None:
    first = encode_move(Move(0, 4), 3)
    second = encode_move(Move(1, 0), 3)
    moves = [
        {"move_index": 0, "actor": "human", "player": 1, "action_index": first, "board": 0, "cell": 4},
        {"move_index": 1, "actor": "ai", "player": 2, "action_index": second, "board": 1, "cell": 0},
    ]
    log = {"metadata": {"number_of_boards": 2, "board_size": 3, "difficulty": 1}, "moves": moves}
    path.write_text(json.dumps(log))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)
    summary = replay_logged_game(log_path, verbose=False)
    assert summary["moves"] == 2
    assert summary["result"] == "ongoing"
    boards = summary["boards"]
    assert boards[0][4] == 1
    assert boards[1][0] == 1
    assert sum(map(sum, boards)) == 2


def test_two_player_match_from_console(tmp_path, monkeypatch):
    replies = iter(["0 0", "0 1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    log_path = tmp_path / "pvp.json"

    main([
        "--mode", "pvp",
        "--boards", "1",
        "--size", "2",
        "--config", str(tmp_path / "absent.yaml"),
        "--log-file", str(log_path),
    ])

    log = json.loads(log_path.read_text())
    assert log["metadata"]["mode"] == "pvp"
    assert log["metadata"]["result"] == "player_one_win"
    assert [entry["actor"] for entry in log["moves"]] == ["player1", "player2"]


def test_turn_ownership():
    assert is_human_turn("pvp", PlayerSide.TWO, PlayerSide.ONE)
    assert is_human_turn("ai", PlayerSide.ONE, PlayerSide.ONE)
    assert not is_human_turn("ai", PlayerSide.TWO, PlayerSide.ONE)
