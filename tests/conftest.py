import pytest

from app import create_app
from models import db, MatchRuleRow, SetRuleRow
from scoring import MatchRule, SetRule


@pytest.fixture
def flask_app():
    """Create test application with in-memory SQLite database"""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SECRET_KEY': 'test-secret-key',
    })

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(flask_app):
    """Test client"""
    return flask_app.test_client()


@pytest.fixture
def best_of_three_row(flask_app):
    """Seeded 'best of 3 sets' match rule"""
    return MatchRuleRow.query.filter_by(name='Best of 3 sets').first()


@pytest.fixture
def fixed_three_row(flask_app):
    """Seeded 'fixed 3 sets' match rule"""
    return MatchRuleRow.query.filter_by(name='Fixed 3 sets').first()


@pytest.fixture
def best_of_two_row(flask_app):
    """Best of 2 winning sets, i.e. at most 3 sets"""
    row = MatchRuleRow(name='Best of 2 sets', best_of=True, num_of_sets=2)
    db.session.add(row)
    db.session.commit()
    return row


@pytest.fixture
def volleyball_row(flask_app):
    """Seeded volleyball set rule"""
    return SetRuleRow.query.filter_by(name='Volleyball').first()


@pytest.fixture
def volleyball_rule():
    return SetRule(
        num_of_points_to_win_regular=25,
        points_diff_to_win_regular=2,
        num_of_points_to_win_tiebreak=15,
        points_diff_to_win_tiebreak=2,
    )


@pytest.fixture
def best_of_two():
    return MatchRule(is_best_of=True, num_of_sets=2)
