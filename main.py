#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
    python main.py simulate [--games N] [--seed S]
"""
import argparse
import logging
import time

import numpy as np

from src.minefield import (
    Difficulty,
    GameStatus,
    MinesweeperEnv,
    Move,
    MoveKind,
    apply_move,
    make_initial_state,
    render_ansi,
)


logger = logging.getLogger(__name__)

COMMANDS = {
    "r": MoveKind.REVEAL,
    "f": MoveKind.FLAG,
    "c": MoveKind.CHORD,
}

HELP_TEXT = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), c ROW COL (chord), "
    "n (new game), q (quit)"
)


def parse_move(line: str) -> Move:
    """
    Parse one line of play input into a move.

    Raises:
        ValueError: If the line is not a recognised command.
    """
    parts = line.split()
    if parts == ["n"]:
        return Move(MoveKind.NEW_GAME)
    if len(parts) != 3 or parts[0] not in COMMANDS:
        raise ValueError(f"Unrecognised command: {line!r}")
    return Move(COMMANDS[parts[0]], int(parts[1]), int(parts[2]))


def play(args: argparse.Namespace) -> None:
    """Play an interactive game on the terminal."""
    rng = np.random.default_rng(args.seed)
    state = make_initial_state(args.difficulty)
    print(HELP_TEXT)

    while True:
        print()
        print(render_ansi(state))
        print(
            f"Status: {state.status.value} | "
            f"Mines remaining: {state.mines_remaining}"
        )
        if state.is_terminal:
            print("*** WIN! ***" if state.is_won else "*** LOST (hit mine) ***")

        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line == "q":
            break

        try:
            move = parse_move(line)
            state = apply_move(state, move, rng=rng, now=time.time())
        except (ValueError, IndexError) as error:
            print(error)


def simulate(args: argparse.Namespace) -> None:
    """Play games with a uniformly random agent and report the win rate."""
    env = MinesweeperEnv(difficulty=args.difficulty)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_steps = 0
    start_time = time.time()

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        info = {}

        while not done:
            valid_indices = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        total_steps += info["steps"]
        if info["game_state"] == GameStatus.WON.name:
            wins += 1
        logger.info(
            "Game %d/%d: %s after %d steps",
            game + 1, args.games, info["game_state"], info["steps"],
        )

    elapsed = time.time() - start_time
    print(f"Results for random agent on {args.difficulty}:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Speed: {args.games / max(elapsed, 1e-9):.1f} games/s")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper board engine"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    difficulties = [level.value for level in Difficulty]

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", choices=difficulties, default="beginner"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Run a random agent for several games"
    )
    simulate_parser.add_argument(
        "--difficulty", choices=difficulties, default="beginner"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Base random seed"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "play":
        play(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
