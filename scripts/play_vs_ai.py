#!/usr/bin/env python3
"""Play Quixo in the console, human or AI on either side, with optional logging & replay."""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from quixo import (
    GameResult,
    IllegalMoveError,
    Move,
    Player,
    Strategy,
    StrategyConfig,
    TurnController,
    TurnPhase,
    make_policy,
)
from quixo.core import BOARD_SIZE

PLAYER_KINDS = ["human"] + [strategy.value for strategy in Strategy]
PLAYER_LABELS = {Player.PLAYER_A: "blue", Player.PLAYER_B: "red"}

DEFAULTS = {
    "player_a": "human",
    "player_b": "greedy",
    "seed": None,
    "max_ply": None,
    "log_file": None,
}


def load_config(path_str: Optional[str]) -> Dict:
    cfg = dict(DEFAULTS)
    if path_str:
        path = Path(path_str)
        if path.exists():
            cfg.update(yaml.safe_load(path.read_text(encoding="utf-8")) or {})
    return cfg


def format_board(controller: TurnController) -> str:
    header = "  " + "".join(str(col) for col in range(BOARD_SIZE))
    rows = controller.board.render().splitlines()
    return "\n".join([header] + [f"{row} {line}" for row, line in enumerate(rows)])


def parse_cell(raw: str) -> Optional[Tuple[int, int]]:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        return None
    col, row = int(parts[0]), int(parts[1])
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        return None
    return col, row


def prompt_cell(message: str) -> Optional[Tuple[int, int]]:
    """Read ``col row`` from stdin; ``None`` means cancel."""
    while True:
        raw = input(message).strip().lower()
        if raw in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        if raw in {"c", "cancel"}:
            return None
        cell = parse_cell(raw)
        if cell is not None:
            return cell
        print(f"Enter a column and a row between 0 and {BOARD_SIZE - 1}, e.g. '0 2'.")


def prompt_human_move(controller: TurnController) -> Move:
    while True:
        source = prompt_cell("Cube to take (col row, q to quit): ")
        if source is None:
            continue
        try:
            destinations = controller.select_source(*source)
        except IllegalMoveError as exc:
            print(exc)
            continue
        options = ", ".join(f"({c},{r})" for c, r in sorted(destinations, key=lambda p: (p[1], p[0])))
        print(f"Destinations: {options}")
        destination = prompt_cell("Push it in at (col row, c to cancel): ")
        if destination is None:
            controller.cancel()
            continue
        try:
            return controller.select_destination(*destination)
        except IllegalMoveError as exc:
            print(exc)
            controller.cancel()


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Log written to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    controller = TurnController()
    if verbose:
        print("Replaying logged game.")
        print(format_board(controller))
    for entry in moves:
        move = Move.between(tuple(entry["from"]), tuple(entry["to"]))
        controller.play(move)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({entry.get('player', '?')}): {move}")
            print(format_board(controller))
    result = controller.state.result
    summary = {
        "result": result.value,
        "moves": len(moves),
        "board": controller.board.grid.tolist(),
    }
    if verbose:
        print(f"Replay finished: {summary['result']}")
    return summary


def play_interactive(cfg: Dict) -> GameResult:
    kinds = {Player.PLAYER_A: cfg["player_a"], Player.PLAYER_B: cfg["player_b"]}
    policies = {}
    for offset, (player, kind) in enumerate(kinds.items()):
        if kind not in PLAYER_KINDS:
            raise ValueError(f"Unknown player kind '{kind}'; expected one of {PLAYER_KINDS}.")
        if kind != "human":
            seed = None if cfg["seed"] is None else int(cfg["seed"]) + offset
            policies[player] = make_policy(StrategyConfig(Strategy.parse(kind), seed=seed))

    controller = TurnController(max_ply=cfg["max_ply"])
    log_records: List[Dict] = []

    while controller.phase != TurnPhase.GAME_OVER:
        player = controller.current_player
        label = PLAYER_LABELS[player]
        print(f"\nTurn #{controller.state.turn // 2 + 1} for {label} player ({player.symbol})")
        print(format_board(controller))

        if player in policies:
            record = controller.play_ai(policies[player])
            actor = kinds[player]
        else:
            prompt_human_move(controller)
            record = controller.commit()
            actor = "human"

        move = record.move
        print(f"{record.turn} | {label} | {move.source_col}, {move.source_row} | {move.dest_col}, {move.dest_row}")
        log_records.append(
            {
                "move_index": record.turn,
                "actor": actor,
                "player": label,
                "from": list(move.source),
                "to": list(move.destination),
            }
        )

    print("\nFinal board:")
    print(format_board(controller))
    result = controller.state.result
    winner = result.winner
    if winner is not None:
        print(f"Winner: {PLAYER_LABELS[winner]} player ({winner.symbol}) after {controller.state.turn} moves.")
    else:
        print(f"Draw after {controller.state.turn} moves.")

    if cfg["log_file"]:
        metadata = {
            "player_a": cfg["player_a"],
            "player_b": cfg["player_b"],
            "seed": cfg["seed"],
            "max_ply": cfg["max_ply"],
            "result": result.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(cfg["log_file"]))
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Quixo in the console.")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--player-a", choices=PLAYER_KINDS)
    parser.add_argument("--player-b", choices=PLAYER_KINDS)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--max-ply", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    cfg = load_config(args.config)
    for key in ("player_a", "player_b", "seed", "max_ply", "log_file"):
        value = getattr(args, key)
        if value is not None:
            cfg[key] = value

    try:
        play_interactive(cfg)
    except (KeyboardInterrupt, EOFError):
        print("\nQuitting.")


if __name__ == "__main__":
    main()
