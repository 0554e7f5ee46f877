"""Entry point for Order & Chaos matches. Load config, wire players, start the game."""

import random
from pathlib import Path

import yaml

from .OrderChaosGame import OrderChaosGame
from .Player import ComputerPlayer, HumanPlayer
from .engine.errors import InvalidSizeError
from .ui.text_view import TextView
from .utils.cli import parse_args
from .utils.logger import log_event

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 6,
    "board_sizes": [6, 7, 8, 9],
    "think_delay_seconds": 0.6,
    "seed": None,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Order_Chaos_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    settings = dict(DEFAULT_SETTINGS)
    settings.update(loaded)
    return settings


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings["board_size"]
    seed = args.seed if args.seed is not None else settings["seed"]
    if args.no_delay:
        think_delay = 0.0
    elif args.think_delay is not None:
        think_delay = args.think_delay
    else:
        think_delay = settings["think_delay_seconds"]

    if board_size not in settings["board_sizes"]:
        log_event(f"Warning: board size {board_size} is outside {settings['board_sizes']}")

    rng = random.Random(seed)
    view = TextView()
    try:
        game = OrderChaosGame(
            board_size=board_size,
            human_player=HumanPlayer(),
            computer_player=ComputerPlayer(rng=rng),
            logger=log_event,
            renderer=view.render,
            rng=rng,
            think_delay=think_delay,
        )
    except InvalidSizeError as exc:
        raise SystemExit(f"error: {exc}") from exc

    match = game.match
    log_event(f"You are {match.human_role}; the computer is {match.computer_role}. {match.turn} moves first.")
    game.play()


if __name__ == "__main__":
    main()
