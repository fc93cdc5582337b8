"""Exceptions raised by the match rule engine."""


class LeagueRulesError(Exception):
    """Base exception for rule and result errors."""


class InvalidRuleConfiguration(LeagueRulesError, ValueError):
    """Raised when a match or set rule cannot be played, e.g. zero sets."""


class InvalidSetResult(LeagueRulesError, ValueError):
    """Raised when a set result string cannot be parsed."""
