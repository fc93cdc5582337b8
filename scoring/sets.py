"""Played sets of a match and the calculations over them."""

import logging
import re
from dataclasses import dataclass

from .exceptions import InvalidSetResult
from .points import PointResult
from .rules import MatchRule, SetRule, is_tie_break_due

logger = logging.getLogger(__name__)

SET_RESULT_PATTERN = re.compile(r'^(\d+)\s*:\s*(\d+)$')


@dataclass
class SetResult:
    """Ball points and set points of one set, in the order it was played."""

    sequence_no: int
    home_ball_points: int = 0
    guest_ball_points: int = 0
    home_set_points: int = 0
    guest_set_points: int = 0
    is_tie_break: bool = False
    is_overruled: bool = False
    match_id: int | None = None

    @property
    def ball_points(self) -> PointResult:
        return PointResult(self.home_ball_points, self.guest_ball_points)

    @property
    def set_points(self) -> PointResult:
        return PointResult(self.home_set_points, self.guest_set_points)

    def calculate_set_points(self, set_rule: SetRule) -> None:
        """Assign set points from the ball points. Clears any overrule."""
        self.is_overruled = False
        if self.home_ball_points > self.guest_ball_points:
            self.home_set_points = set_rule.points_set_won
            self.guest_set_points = set_rule.points_set_lost
        elif self.home_ball_points < self.guest_ball_points:
            self.home_set_points = set_rule.points_set_lost
            self.guest_set_points = set_rule.points_set_won
        else:
            self.home_set_points = self.guest_set_points = set_rule.points_set_tie

    def overrule(
        self,
        home_ball_points: int,
        guest_ball_points: int,
        home_set_points: int,
        guest_set_points: int,
    ) -> None:
        """Replace the result by a decision of the league management."""
        self.home_ball_points = home_ball_points
        self.guest_ball_points = guest_ball_points
        self.home_set_points = home_set_points
        self.guest_set_points = guest_set_points
        self.is_tie_break = False
        self.is_overruled = True

    def to_dict(self) -> dict:
        return {
            'sequence_no': self.sequence_no,
            'ball_points': str(self.ball_points),
            'set_points': str(self.set_points),
            'is_tie_break': self.is_tie_break,
            'is_overruled': self.is_overruled,
        }


def parse_sets(text: str, match_id: int | None = None) -> list[SetResult]:
    """Parse space separated set results like ``"25:23 23:25 15:10"``."""
    sets: list[SetResult] = []
    for sequence_no, token in enumerate((text or '').split(), start=1):
        match = SET_RESULT_PATTERN.match(token)
        if not match:
            raise InvalidSetResult(f"Set {sequence_no}: '{token}' is not a result like 25:23")
        sets.append(
            SetResult(
                sequence_no=sequence_no,
                home_ball_points=int(match.group(1)),
                guest_ball_points=int(match.group(2)),
                match_id=match_id,
            )
        )
    return sets


def calculate_sets_points(sets: list[SetResult], set_rule: SetRule, match_rule: MatchRule) -> list[SetResult]:
    """Assign set points to every set and flag the deciding set of best-of matches."""
    home_won = guest_won = 0
    for set_result in sets:
        set_result.calculate_set_points(set_rule)
        set_result.is_tie_break = is_tie_break_due(match_rule, home_won, guest_won)
        if set_result.home_ball_points > set_result.guest_ball_points:
            home_won += 1
        elif set_result.home_ball_points < set_result.guest_ball_points:
            guest_won += 1
    logger.debug('Calculated set points for %d sets, sets won %d:%d', len(sets), home_won, guest_won)
    return sets


def get_sets_won(sets: list[SetResult]) -> PointResult:
    return PointResult(
        sum(1 for s in sets if s.home_ball_points > s.guest_ball_points),
        sum(1 for s in sets if s.home_ball_points < s.guest_ball_points),
    )


def max_best_of(sets: list[SetResult]) -> int:
    """Number of sets won by the side that won more sets."""
    sets_won = get_sets_won(sets)
    return max(sets_won.home, sets_won.guest)


def get_set_points(sets: list[SetResult]) -> PointResult:
    return PointResult(sum(s.home_set_points for s in sets), sum(s.guest_set_points for s in sets))


def get_total_ball_points(sets: list[SetResult]) -> int:
    return sum(s.home_ball_points + s.guest_ball_points for s in sets)


def is_match_overruled(sets: list[SetResult]) -> bool:
    return any(s.is_overruled for s in sets)


def calculate_match_points(sets: list[SetResult], match_rule: MatchRule) -> PointResult:
    """Table points of both sides, awarded by comparing the summed set points.

    Without any sets the match has no points yet and both sides are None.
    """
    if not sets:
        return PointResult(None, None)

    set_points = get_set_points(sets)
    if set_points.home < set_points.guest:
        points = PointResult(match_rule.points_match_lost, match_rule.points_match_won)
    elif set_points.home > set_points.guest:
        points = PointResult(match_rule.points_match_won, match_rule.points_match_lost)
    else:
        points = PointResult(match_rule.points_match_tie, match_rule.points_match_tie)
    logger.debug('Match points %s from set points %s', points, set_points)
    return points
