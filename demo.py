#!/usr/bin/env python3
"""Watch random play of Minesweeper."""
import argparse
import time
import os
from typing import Optional

import numpy as np

from src.sweeper.board import BoardConfig
from src.sweeper.environment import MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def demo(
    delay: float = 0.3,
    games: int = 5,
    config: Optional[BoardConfig] = None,
    seed: Optional[int] = None,
) -> int:
    """
    Run demo games picking uniformly among actions that change the board.

    Returns:
        Number of games won.
    """
    if games < 1:
        raise ValueError(f"games must be at least 1, got {games}")

    config = config or BoardConfig()
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)
    cells = config.width * config.height

    print(f"Board: {config.width}x{config.height} with {config.bomb_count} bombs "
          f"({100*config.bomb_count/cells:.1f}% density)")

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            valid_actions = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_actions))
            intent, col, row = env.decode_action(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins} | {env.board.status_text()}")
            print(f"Last move: {'reveal' if intent == 0 else 'annotate'} ({col}, {row})\n")
            print(env.render())

            if done:
                if info.get("phase") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit bomb) ***")

            time.sleep(delay)

        time.sleep(delay)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")
    return wins


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=positive_int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--bombs", type=int, default=10, help="Number of bombs")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(
        delay=args.delay,
        games=args.games,
        config=BoardConfig(width=args.size, height=args.size, bomb_count=args.bombs),
        seed=args.seed,
    )
