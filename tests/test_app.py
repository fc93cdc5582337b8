"""Rule lookup and result checking endpoints."""

from app import create_app, database_uri
from models import db, MatchRuleRow


class TestAppFactory:

    def test_postgres_scheme_is_rewritten(self, monkeypatch):
        monkeypatch.setenv('DATABASE_URL', 'postgres://user:pw@localhost/league')
        assert database_uri() == 'postgresql://user:pw@localhost/league'

    def test_sqlite_path_fallback(self, monkeypatch, tmp_path):
        monkeypatch.delenv('DATABASE_URL', raising=False)
        sqlite_path = tmp_path / 'data' / 'league.db'
        monkeypatch.setenv('SQLITE_PATH', str(sqlite_path))
        assert database_uri() == f'sqlite:///{sqlite_path}'

        app = create_app({'TESTING': True})
        with app.app_context():
            assert MatchRuleRow.query.count() == 2
            db.session.remove()
            db.engine.dispose()
        assert sqlite_path.exists()

    def test_testing_config_is_applied(self, flask_app):
        assert flask_app.testing is True
        assert flask_app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'

    def test_blueprint_is_registered(self, flask_app):
        assert 'rules' in flask_app.blueprints


class TestMatchRuleEndpoints:

    def test_list_match_rules(self, client):
        response = client.get('/rules/match-rules')
        assert response.status_code == 200
        by_name = {rule['name']: rule for rule in response.get_json()}
        assert by_name['Best of 3 sets']['max_number_of_sets'] == 5
        assert by_name['Fixed 3 sets']['max_number_of_sets'] == 3
        assert by_name['Fixed 3 sets']['points_match_won'] == 3

    def test_match_rule_detail(self, client, best_of_three_row):
        response = client.get(f'/rules/match-rules/{best_of_three_row.id}')
        assert response.status_code == 200
        data = response.get_json()
        assert data['best_of'] is True
        assert data['num_of_sets'] == 3

    def test_missing_match_rule_is_404(self, client):
        response = client.get('/rules/match-rules/9999')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Not found'}

    def test_list_set_rules(self, client):
        response = client.get('/rules/set-rules')
        assert response.status_code == 200
        assert [rule['name'] for rule in response.get_json()] == ['Volleyball']


class TestResultEndpoint:

    def post_result(self, client, rule_id, payload):
        return client.post(f'/rules/match-rules/{rule_id}/results', json=payload)

    def test_valid_best_of_result(self, client, best_of_two_row, volleyball_row):
        response = self.post_result(client, best_of_two_row.id, {
            'set_rule_id': volleyball_row.id,
            'sets': '25:23 23:25 15:10',
        })
        assert response.status_code == 200
        data = response.get_json()
        assert data['valid'] is True
        assert data['errors'] == []
        assert data['sets_won'] == '2:1'
        assert data['set_points'] == '2:1'
        assert data['total_ball_points'] == 121
        assert data['match_points'] == '3:0'
        assert data['is_overruled'] is False
        assert data['sets'][-1]['is_tie_break'] is True
        assert data['notification'] == 'ResultEnteredTxt'

    def test_default_set_rule_when_omitted(self, client, fixed_three_row):
        response = self.post_result(client, fixed_three_row.id, {'sets': '25:20 25:20 20:25'})
        assert response.status_code == 200
        assert response.get_json()['valid'] is True

    def test_invalid_tie_break_is_rejected(self, client, best_of_two_row, volleyball_row):
        response = self.post_result(client, best_of_two_row.id, {
            'set_rule_id': volleyball_row.id,
            'sets': '25:23 23:25 16:15',
        })
        assert response.status_code == 422
        data = response.get_json()
        assert data['valid'] is False
        assert [error['fact'] for error in data['errors']] == ['all_sets_are_valid']
        assert data['single_set_errors'][0]['sequence_no'] == 3
        assert data['single_set_errors'][0]['fact'] == 'tie_break_win_reached_with_two_plus_points_ahead'
        assert data['notification'] is None

    def test_too_many_sets_for_fixed_format(self, client, fixed_three_row):
        response = self.post_result(client, fixed_three_row.id, {'sets': '25:20 25:20 25:20 25:20'})
        assert response.status_code == 422
        facts = [error['fact'] for error in response.get_json()['errors']]
        assert 'min_and_max_of_sets_played' in facts

    def test_set_after_match_was_decided(self, client, best_of_two_row):
        response = self.post_result(client, best_of_two_row.id, {'sets': '25:20 25:20 25:20'})
        assert response.status_code == 422
        facts = [error['fact'] for error in response.get_json()['errors']]
        assert 'best_of_no_match_after_best_of_reached' in facts

    def test_malformed_sets_is_bad_request(self, client, best_of_two_row):
        response = self.post_result(client, best_of_two_row.id, {'sets': '25-20'})
        assert response.status_code == 400
        assert 'error' in response.get_json()

    def test_missing_sets_is_bad_request(self, client, best_of_two_row):
        response = self.post_result(client, best_of_two_row.id, {})
        assert response.status_code == 400

    def test_non_json_body_is_bad_request(self, client, best_of_two_row):
        response = client.post(
            f'/rules/match-rules/{best_of_two_row.id}/results',
            data='sets=25:20',
            content_type='application/x-www-form-urlencoded',
        )
        assert response.status_code == 400

    def test_invalid_set_rule_id_is_bad_request(self, client, best_of_two_row):
        response = self.post_result(client, best_of_two_row.id, {'sets': '25:20 25:20', 'set_rule_id': 'x'})
        assert response.status_code == 400

    def test_unknown_set_rule_is_404(self, client, best_of_two_row):
        response = self.post_result(client, best_of_two_row.id, {'sets': '25:20 25:20', 'set_rule_id': 9999})
        assert response.status_code == 404

    def test_unknown_match_rule_is_404(self, client):
        response = self.post_result(client, 9999, {'sets': '25:20 25:20'})
        assert response.status_code == 404
