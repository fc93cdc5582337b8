"""Match and set rules, and the quantities derived from them."""

from dataclasses import dataclass, fields

from .exceptions import InvalidRuleConfiguration


def check_rule_value(name: str, value, minimum: int = 0) -> int:
    """Return ``value`` if it is an integer of at least ``minimum``, raise InvalidRuleConfiguration otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRuleConfiguration(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidRuleConfiguration(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class MatchRule:
    """How many sets a match has, whether it ends once a side reaches the win threshold,
    and the table points a won, lost or tied match is worth."""

    is_best_of: bool
    num_of_sets: int
    points_match_won: int = 3
    points_match_lost: int = 0
    points_match_tie: int = 1

    def __post_init__(self):
        check_rule_value('num_of_sets', self.num_of_sets, minimum=1)
        for name in ('points_match_won', 'points_match_lost', 'points_match_tie'):
            check_rule_value(name, getattr(self, name))


@dataclass(frozen=True)
class SetRule:
    """Ball points needed to win a set, and the table points a set is worth.

    A points difference of 0 means the set may end in a tie.
    """

    num_of_points_to_win_regular: int = 25
    points_diff_to_win_regular: int = 2
    num_of_points_to_win_tiebreak: int = 15
    points_diff_to_win_tiebreak: int = 2
    points_set_won: int = 1
    points_set_lost: int = 0
    points_set_tie: int = 0

    def __post_init__(self):
        for field in fields(self):
            check_rule_value(field.name, getattr(self, field.name))


def max_number_of_sets(rule: MatchRule) -> int:
    """Maximum number of sets that can be played under ``rule``."""
    return rule.num_of_sets * 2 - 1 if rule.is_best_of else rule.num_of_sets


def min_number_of_sets(rule: MatchRule) -> int:
    return rule.num_of_sets


def win_threshold(rule: MatchRule) -> int | None:
    """Sets a side must win to end a best-of match, None for fixed formats."""
    return rule.num_of_sets if rule.is_best_of else None


def is_tie_break_due(rule: MatchRule, home_sets_won: int, guest_sets_won: int) -> bool:
    """True if the next set of a best-of match is the deciding tie-break."""
    return (
        rule.is_best_of
        and home_sets_won == guest_sets_won
        and home_sets_won + guest_sets_won == max_number_of_sets(rule) - 1
    )
