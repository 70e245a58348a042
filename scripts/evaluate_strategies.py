#!/usr/bin/env python3
"""Play two strategies against each other and print a JSON summary."""

import argparse
import json

from quixo import QuixoEnv, Strategy, StrategyConfig, evaluate_policies, make_policy


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--player-a", choices=[s.value for s in Strategy], default="greedy")
    parser.add_argument("--player-b", choices=[s.value for s in Strategy], default="random")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--max-ply", type=int, default=200)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    policy_a = make_policy(StrategyConfig(Strategy.parse(args.player_a), seed=args.seed))
    policy_b = make_policy(StrategyConfig(Strategy.parse(args.player_b), seed=args.seed + 1))

    result = evaluate_policies(
        policy_a,
        policy_b,
        episodes=args.episodes,
        env_factory=lambda: QuixoEnv(max_ply=args.max_ply),
        progress=True,
    )

    output = {"player_a": args.player_a, "player_b": args.player_b, **result.as_dict()}
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
