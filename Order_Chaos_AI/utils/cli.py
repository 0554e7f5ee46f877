"""CLI options for board size, randomness and config paths."""


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Order & Chaos against the computer")
    parser.add_argument("--board-size", type=int, help="Board size (6-9 recommended, at least 5)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for role, turn and computer randomness")
    parser.add_argument("--think-delay", type=float, default=None, help="Seconds the computer pauses before moving")
    parser.add_argument("--no-delay", action="store_true", help="Disable the computer's thinking pause")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)
