from datetime import datetime
import os

import pytz
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import validates

from scoring import MatchRule, SetRule, max_number_of_sets
from scoring.rules import check_rule_value

db = SQLAlchemy()

LEAGUE_TIMEZONE = pytz.timezone(os.environ.get('LEAGUE_TIMEZONE', 'Europe/Berlin'))

MATCH_RULE_POINT_FIELDS = (
    'points_match_won',
    'points_match_lost',
    'points_match_tie',
)

SET_RULE_POINT_FIELDS = (
    'num_of_points_to_win_regular',
    'points_diff_to_win_regular',
    'num_of_points_to_win_tiebreak',
    'points_diff_to_win_tiebreak',
    'points_set_won',
    'points_set_lost',
    'points_set_tie',
)


def current_time():
    return datetime.now(LEAGUE_TIMEZONE)


class MatchRuleRow(db.Model):
    """Stored match format of a competition. Mapped to a MatchRule for evaluation."""

    __tablename__ = 'match_rule'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    best_of = db.Column(db.Boolean, nullable=False, default=False)
    num_of_sets = db.Column(db.Integer, nullable=False)
    points_match_won = db.Column(db.Integer, nullable=False, default=3)
    points_match_lost = db.Column(db.Integer, nullable=False, default=0)
    points_match_tie = db.Column(db.Integer, nullable=False, default=1)
    created_on = db.Column(db.DateTime, default=current_time)
    modified_on = db.Column(db.DateTime, default=current_time, onupdate=current_time)

    def __repr__(self):  # pragma: no cover - debug helper
        return f"<MatchRuleRow {self.id} {self.name} best_of={self.best_of} sets={self.num_of_sets}>"

    @validates('num_of_sets')
    def validate_num_of_sets(self, key, value):
        return check_rule_value(key, value, minimum=1)

    @validates(*MATCH_RULE_POINT_FIELDS)
    def validate_match_points(self, key, value):
        if value is None:
            return value
        return check_rule_value(key, value)

    def to_rule(self) -> MatchRule:
        # unset columns fall back to the MatchRule defaults until the row is flushed
        values = {name: getattr(self, name) for name in MATCH_RULE_POINT_FIELDS if getattr(self, name) is not None}
        return MatchRule(is_best_of=bool(self.best_of), num_of_sets=self.num_of_sets, **values)

    def to_dict(self) -> dict:
        rule = self.to_rule()
        return {
            'id': self.id,
            'name': self.name,
            'best_of': bool(self.best_of),
            'num_of_sets': self.num_of_sets,
            'max_number_of_sets': max_number_of_sets(rule),
            **{name: getattr(rule, name) for name in MATCH_RULE_POINT_FIELDS},
        }


class SetRuleRow(db.Model):
    """Stored ball point and set point rules."""

    __tablename__ = 'set_rule'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    num_of_points_to_win_regular = db.Column(db.Integer, nullable=False, default=25)
    points_diff_to_win_regular = db.Column(db.Integer, nullable=False, default=2)
    num_of_points_to_win_tiebreak = db.Column(db.Integer, nullable=False, default=15)
    points_diff_to_win_tiebreak = db.Column(db.Integer, nullable=False, default=2)
    points_set_won = db.Column(db.Integer, nullable=False, default=1)
    points_set_lost = db.Column(db.Integer, nullable=False, default=0)
    points_set_tie = db.Column(db.Integer, nullable=False, default=0)
    created_on = db.Column(db.DateTime, default=current_time)
    modified_on = db.Column(db.DateTime, default=current_time, onupdate=current_time)

    def __repr__(self):  # pragma: no cover - debug helper
        return f"<SetRuleRow {self.id} {self.name}>"

    @validates(*SET_RULE_POINT_FIELDS)
    def validate_points(self, key, value):
        if value is None:
            return value
        return check_rule_value(key, value)

    def to_rule(self) -> SetRule:
        # unset columns fall back to the SetRule defaults until the row is flushed
        values = {name: getattr(self, name) for name in SET_RULE_POINT_FIELDS if getattr(self, name) is not None}
        return SetRule(**values)

    def to_dict(self) -> dict:
        data = {'id': self.id, 'name': self.name}
        rule = self.to_rule()
        data.update({name: getattr(rule, name) for name in SET_RULE_POINT_FIELDS})
        return data


def init_default_data():
    """Seed the standard match and set rules if they are missing."""

    defaults = [
        MatchRuleRow(name='Best of 3 sets', best_of=True, num_of_sets=3),
        MatchRuleRow(name='Fixed 3 sets', best_of=False, num_of_sets=3),
    ]
    for row in defaults:
        if not MatchRuleRow.query.filter_by(name=row.name).first():
            db.session.add(row)

    if not SetRuleRow.query.filter_by(name='Volleyball').first():
        db.session.add(
            SetRuleRow(
                name='Volleyball',
                num_of_points_to_win_regular=25,
                points_diff_to_win_regular=2,
                num_of_points_to_win_tiebreak=15,
                points_diff_to_win_tiebreak=2,
                points_set_won=1,
                points_set_lost=0,
                points_set_tie=0,
            )
        )

    db.session.commit()
