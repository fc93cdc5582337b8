"""
Scoring package for the league application
Match and set rules, set results and their validation
"""

from .exceptions import InvalidRuleConfiguration, InvalidSetResult, LeagueRulesError
from .points import PointResult
from .rules import (
    MatchRule,
    SetRule,
    is_tie_break_due,
    max_number_of_sets,
    min_number_of_sets,
    win_threshold,
)
from .sets import (
    SetResult,
    calculate_match_points,
    calculate_sets_points,
    get_set_points,
    get_sets_won,
    get_total_ball_points,
    is_match_overruled,
    max_best_of,
    parse_sets,
)
from .validators import SetsValidator, SingleSetValidator, ValidationMode

__all__ = [
    'InvalidRuleConfiguration',
    'InvalidSetResult',
    'LeagueRulesError',
    'MatchRule',
    'PointResult',
    'SetResult',
    'SetRule',
    'SetsValidator',
    'SingleSetValidator',
    'ValidationMode',
    'calculate_match_points',
    'calculate_sets_points',
    'get_set_points',
    'get_sets_won',
    'get_total_ball_points',
    'is_match_overruled',
    'is_tie_break_due',
    'max_best_of',
    'max_number_of_sets',
    'min_number_of_sets',
    'parse_sets',
    'win_threshold',
]
