"""Fact based validation of set results.

A validator owns a list of :class:`Fact` objects. Each fact checks one rule
and reports a :class:`FactResult`. Facts are checked by type: critical facts
first, then errors, then everything else, stopping after the first type
with a failed fact.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, NamedTuple

from .rules import MatchRule, SetRule, max_number_of_sets
from .sets import SetResult


class FactType(Enum):
    CRITICAL = 'critical'
    ERROR = 'error'
    WARNING = 'warning'


class ValidationMode(Enum):
    """DEFAULT validates ball points entered by teams, OVERRULE validates set points set by the league."""

    DEFAULT = 'default'
    OVERRULE = 'overrule'


@dataclass
class FactResult:
    success: bool
    message: str = ''


@dataclass(eq=False)
class Fact:
    id: Enum
    check: Callable[[], FactResult]
    field_names: tuple[str, ...] = ()
    type: FactType = FactType.ERROR
    enabled: bool = True
    message: str = ''
    success: bool = False
    is_checked: bool = False
    exception: Exception | None = field(default=None, repr=False)

    def reset(self) -> None:
        self.success = self.is_checked = False
        self.exception = None


class BaseValidator:
    """Holds the model to validate, the data needed to do so, and the facts."""

    def __init__(self, model: Any, data: Any):
        self.model = model
        self.data = data
        self.facts: list[Fact] = []
        self.logger = logging.getLogger(f'{type(self).__module__}.{type(self).__name__}')
        self.create_facts()

    def create_facts(self) -> None:
        raise NotImplementedError

    def get_fact(self, fact_id: Enum) -> Fact:
        for fact in self.facts:
            if fact.id == fact_id:
                return fact
        raise KeyError(fact_id)

    def facts_of_type(self, fact_type: FactType) -> list[Fact]:
        return [fact for fact in self.facts if fact.type == fact_type]

    def check_fact(self, fact_id: Enum) -> Fact:
        """Run a single fact. Disabled facts are returned unchecked."""
        fact = self.get_fact(fact_id)
        if not fact.enabled:
            return fact

        fact.reset()
        try:
            result = fact.check()
            fact.success = result.success
            fact.message = result.message
            self.logger.debug("Fact '%s': %s", fact.id.name, fact.success)
        except Exception as exc:
            fact.success = False
            fact.message = ''
            fact.exception = exc
            self.logger.exception("Fact '%s' raised while checking", fact.id.name)
        fact.is_checked = True
        return fact

    def check(self) -> list[Fact]:
        """Check all facts, critical first. Returns the facts of the last type that was checked."""
        self.reset()

        for fact_type in (FactType.CRITICAL, FactType.ERROR):
            facts = self.facts_of_type(fact_type)
            for fact in facts:
                self.check_fact(fact.id)
            if any(fact.is_checked and not fact.success for fact in facts):
                return facts

        for fact in self.facts:
            if not fact.is_checked:
                self.check_fact(fact.id)

        return [fact for fact in self.facts if fact.is_checked]

    def reset(self) -> list[Fact]:
        for fact in self.facts:
            fact.reset()
        return list(self.facts)

    def enabled_facts(self) -> list[Fact]:
        return [fact for fact in self.facts if fact.enabled]

    def failed_facts(self) -> list[Fact]:
        return [fact for fact in self.facts if fact.is_checked and (not fact.success or fact.exception)]

    def is_valid(self) -> bool:
        return not self.failed_facts()


class SingleSetValidator(BaseValidator):
    """Validates the ball points (or, when overruled, the set points) of one set."""

    class FactId(Enum):
        BALL_POINTS_NOT_NEGATIVE = 'ball_points_not_negative'
        TIE_IS_ALLOWED = 'tie_is_allowed'
        NUM_OF_POINTS_TO_WIN_REACHED = 'num_of_points_to_win_reached'
        REGULAR_WIN_REACHED_WITH_ONE_POINT_AHEAD = 'regular_win_reached_with_one_point_ahead'
        REGULAR_WIN_REACHED_WITH_TWO_PLUS_POINTS_AHEAD = 'regular_win_reached_with_two_plus_points_ahead'
        TIE_BREAK_WIN_REACHED_WITH_ONE_POINT_AHEAD = 'tie_break_win_reached_with_one_point_ahead'
        TIE_BREAK_WIN_REACHED_WITH_TWO_PLUS_POINTS_AHEAD = 'tie_break_win_reached_with_two_plus_points_ahead'
        SET_POINTS_ARE_VALID = 'set_points_are_valid'

    BALL_POINT_FIELDS = ('home_ball_points', 'guest_ball_points')
    SET_POINT_FIELDS = ('home_set_points', 'guest_set_points')

    def __init__(self, model: SetResult, set_rule: SetRule, mode: ValidationMode = ValidationMode.DEFAULT):
        self.mode = mode
        super().__init__(model, set_rule)

    @property
    def set_rule(self) -> SetRule:
        return self.data

    def create_facts(self) -> None:
        fact_id = self.FactId
        overrule = self.mode == ValidationMode.OVERRULE

        self.facts.append(Fact(
            id=fact_id.BALL_POINTS_NOT_NEGATIVE,
            check=self._ball_points_not_negative,
            field_names=self.BALL_POINT_FIELDS,
            type=FactType.CRITICAL,
        ))
        self.facts.append(Fact(
            id=fact_id.TIE_IS_ALLOWED,
            check=self._tie_is_allowed,
            field_names=self.BALL_POINT_FIELDS,
            enabled=not overrule,
        ))
        self.facts.append(Fact(
            id=fact_id.NUM_OF_POINTS_TO_WIN_REACHED,
            check=self._num_of_points_to_win_reached,
            field_names=self.BALL_POINT_FIELDS,
            enabled=not overrule,
        ))
        self.facts.append(Fact(
            id=fact_id.REGULAR_WIN_REACHED_WITH_ONE_POINT_AHEAD,
            check=lambda: self._win_reached_with_one_point_ahead(tie_break=False),
            field_names=self.BALL_POINT_FIELDS,
            enabled=not overrule,
        ))
        self.facts.append(Fact(
            id=fact_id.REGULAR_WIN_REACHED_WITH_TWO_PLUS_POINTS_AHEAD,
            check=lambda: self._win_reached_with_two_plus_points_ahead(tie_break=False),
            field_names=self.BALL_POINT_FIELDS,
            enabled=not overrule,
        ))
        self.facts.append(Fact(
            id=fact_id.TIE_BREAK_WIN_REACHED_WITH_ONE_POINT_AHEAD,
            check=lambda: self._win_reached_with_one_point_ahead(tie_break=True),
            field_names=self.BALL_POINT_FIELDS,
            enabled=not overrule,
        ))
        self.facts.append(Fact(
            id=fact_id.TIE_BREAK_WIN_REACHED_WITH_TWO_PLUS_POINTS_AHEAD,
            check=lambda: self._win_reached_with_two_plus_points_ahead(tie_break=True),
            field_names=self.BALL_POINT_FIELDS,
            enabled=not overrule,
        ))
        self.facts.append(Fact(
            id=fact_id.SET_POINTS_ARE_VALID,
            check=self._set_points_are_valid,
            field_names=self.SET_POINT_FIELDS,
            enabled=overrule,
        ))

    def _points_to_win(self, tie_break: bool) -> tuple[int, int]:
        if tie_break:
            return self.set_rule.num_of_points_to_win_tiebreak, self.set_rule.points_diff_to_win_tiebreak
        return self.set_rule.num_of_points_to_win_regular, self.set_rule.points_diff_to_win_regular

    def _ball_points_not_negative(self) -> FactResult:
        return FactResult(
            success=self.model.home_ball_points >= 0 and self.model.guest_ball_points >= 0,
            message='Ball points must not be negative.',
        )

    def _tie_is_allowed(self) -> FactResult:
        home, guest = self.model.home_ball_points, self.model.guest_ball_points
        result = FactResult(success=True, message='A tie is not allowed for this set.')
        if home == guest:
            _, points_diff = self._points_to_win(self.model.is_tie_break)
            result.success = points_diff == 0 and (home > 0 or guest > 0)
        return result

    def _num_of_points_to_win_reached(self) -> FactResult:
        points_to_win, _ = self._points_to_win(self.model.is_tie_break)
        return FactResult(
            success=self.model.home_ball_points >= points_to_win or self.model.guest_ball_points >= points_to_win,
            message=f'One of the teams must have at least {points_to_win} ball points to win the set.',
        )

    def _win_reached_with_one_point_ahead(self, tie_break: bool) -> FactResult:
        points_to_win, points_diff = self._points_to_win(tie_break)
        home, guest = self.model.home_ball_points, self.model.guest_ball_points
        result = FactResult(
            success=True,
            message=(
                f'The winner of the set must have exactly {points_to_win} ball points '
                f'and be at least {points_diff} point ahead.'
            ),
        )
        if self.model.is_tie_break == tie_break and points_diff == 1:
            # one team reached exactly the points to win, the other has less
            result.success = (home == points_to_win and guest < home) or (guest == points_to_win and home < guest)
        return result

    def _win_reached_with_two_plus_points_ahead(self, tie_break: bool) -> FactResult:
        points_to_win, points_diff = self._points_to_win(tie_break)
        home, guest = self.model.home_ball_points, self.model.guest_ball_points
        result = FactResult(success=True)
        if self.model.is_tie_break != tie_break or points_diff <= 1:
            return result

        if (home == points_to_win and home > guest) or (guest == points_to_win and guest > home):
            result.success = abs(home - guest) >= points_diff
            result.message = (
                f'The difference in ball points must be at least {points_diff} '
                f'if a team has {points_to_win} ball points.'
            )
        elif home > points_to_win or guest > points_to_win:
            result.success = abs(home - guest) == points_diff
            result.message = (
                f'The difference in ball points must be exactly {points_diff} '
                f'if a team has more than {points_to_win} ball points.'
            )
        return result

    def _set_points_are_valid(self) -> FactResult:
        highest = max(self.set_rule.points_set_won, self.set_rule.points_set_lost, self.set_rule.points_set_tie)
        valid_range = range(0, highest + 1)
        return FactResult(
            success=self.model.home_set_points in valid_range and self.model.guest_set_points in valid_range,
            message=f'Set points must be between 0 and {highest}.',
        )


class SingleSetError(NamedTuple):
    sequence_no: int
    fact_id: SingleSetValidator.FactId
    message: str


class SetsValidator(BaseValidator):
    """Validates the list of sets of a match against the match rule and the set rule."""

    class FactId(Enum):
        MIN_AND_MAX_OF_SETS_PLAYED = 'min_and_max_of_sets_played'
        BEST_OF_MIN_AND_MAX_OF_SETS_PLAYED = 'best_of_min_and_max_of_sets_played'
        ALL_SETS_ARE_VALID = 'all_sets_are_valid'
        BEST_OF_REQUIRED_TIE_BREAK_PLAYED = 'best_of_required_tie_break_played'
        BEST_OF_NO_MATCH_AFTER_BEST_OF_REACHED = 'best_of_no_match_after_best_of_reached'

    def __init__(
        self,
        model: list[SetResult],
        match_rule: MatchRule,
        set_rule: SetRule,
        mode: ValidationMode = ValidationMode.DEFAULT,
    ):
        self.mode = mode
        self.single_set_errors: list[SingleSetError] = []
        super().__init__(model, (match_rule, set_rule))

    @property
    def match_rule(self) -> MatchRule:
        return self.data[0]

    @property
    def set_rule(self) -> SetRule:
        return self.data[1]

    def create_facts(self) -> None:
        fact_id = self.FactId
        self.facts.append(Fact(
            id=fact_id.MIN_AND_MAX_OF_SETS_PLAYED,
            check=self._min_and_max_of_sets_played,
            field_names=('sets',),
            type=FactType.CRITICAL,
        ))
        self.facts.append(Fact(
            id=fact_id.BEST_OF_MIN_AND_MAX_OF_SETS_PLAYED,
            check=self._best_of_min_and_max_of_sets_played,
            field_names=('sets',),
            type=FactType.CRITICAL,
        ))
        self.facts.append(Fact(
            id=fact_id.ALL_SETS_ARE_VALID,
            check=self._all_sets_are_valid,
            field_names=('sets',),
            type=FactType.CRITICAL,
        ))
        self.facts.append(Fact(
            id=fact_id.BEST_OF_REQUIRED_TIE_BREAK_PLAYED,
            check=self._best_of_required_tie_break_played,
            field_names=('sets',),
            # overruled sets never carry the tie-break flag
            enabled=self.mode != ValidationMode.OVERRULE,
        ))
        self.facts.append(Fact(
            id=fact_id.BEST_OF_NO_MATCH_AFTER_BEST_OF_REACHED,
            check=self._best_of_no_match_after_best_of_reached,
            field_names=('sets',),
        ))

    def _min_and_max_of_sets_played(self) -> FactResult:
        return FactResult(
            success=self.match_rule.is_best_of or len(self.model) == self.match_rule.num_of_sets,
            message=f'Exactly {self.match_rule.num_of_sets} sets must be played.',
        )

    def _best_of_min_and_max_of_sets_played(self) -> FactResult:
        max_sets = max_number_of_sets(self.match_rule)
        return FactResult(
            success=(
                not self.match_rule.is_best_of
                or self.match_rule.num_of_sets <= len(self.model) <= max_sets
            ),
            message=f'Between {self.match_rule.num_of_sets} and {max_sets} sets must be played.',
        )

    def _all_sets_are_valid(self) -> FactResult:
        self.single_set_errors = []
        for set_result in self.model:
            validator = SingleSetValidator(set_result, self.set_rule, self.mode)
            validator.check()
            failed = validator.failed_facts()
            if failed:
                self.single_set_errors.append(
                    SingleSetError(set_result.sequence_no, failed[0].id, failed[0].message)
                )
        return FactResult(success=not self.single_set_errors, message='Not all sets have a valid result.')

    def _best_of_required_tie_break_played(self) -> FactResult:
        max_sets = max_number_of_sets(self.match_rule)
        result = FactResult(
            success=True,
            message=f'In a best of {self.match_rule.num_of_sets} match the set no. {max_sets} must be a tie-break.',
        )
        if self.match_rule.is_best_of and self.model and len(self.model) == max_sets:
            result.success = self.model[-1].is_tie_break
        return result

    def _best_of_no_match_after_best_of_reached(self) -> FactResult:
        threshold = self.match_rule.num_of_sets
        result = FactResult(
            success=True,
            message=f'No more sets may be played after a team has won {threshold} sets.',
        )
        if not self.match_rule.is_best_of:
            return result

        home_won = guest_won = 0
        for index, set_result in enumerate(self.model):
            if set_result.home_ball_points < set_result.guest_ball_points:
                guest_won += 1
            elif set_result.home_ball_points > set_result.guest_ball_points:
                home_won += 1
            if threshold in (home_won, guest_won) and index + 1 < len(self.model):
                result.success = False
                break
        return result
