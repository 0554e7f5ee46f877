"""Roles, participants (sides) and match statuses."""

ORDER = "Order"
CHAOS = "Chaos"
ROLES = (ORDER, CHAOS)

HUMAN = "human"
COMPUTER = "computer"
SIDES = (HUMAN, COMPUTER)

IN_PROGRESS = "in_progress"
ORDER_WINS = "order_wins"
CHAOS_WINS = "chaos_wins"
TERMINAL_STATUSES = (ORDER_WINS, CHAOS_WINS)


def other_role(role):
    return CHAOS if role == ORDER else ORDER


def other_side(side):
    return COMPUTER if side == HUMAN else HUMAN


def winning_role(status):
    """Role that won for a terminal status, else None."""
    if status == ORDER_WINS:
        return ORDER
    if status == CHAOS_WINS:
        return CHAOS
    return None
