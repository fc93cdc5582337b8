"""Match rule lookup and set result checking for the results entry forms."""

from flask import Blueprint, current_app, jsonify, request

from models import db, MatchRuleRow, SetRuleRow
from notifications import EmailTemplate
from scoring import (
    InvalidSetResult,
    SetRule,
    SetsValidator,
    calculate_match_points,
    calculate_sets_points,
    get_set_points,
    get_sets_won,
    get_total_ball_points,
    is_match_overruled,
    parse_sets,
)

rules_bp = Blueprint('rules', __name__, url_prefix='/rules')


def _bad_request(message: str):
    return jsonify({'error': message}), 400


@rules_bp.route('/match-rules')
def list_match_rules():
    rules = MatchRuleRow.query.order_by(MatchRuleRow.name.asc()).all()
    return jsonify([rule.to_dict() for rule in rules])


@rules_bp.route('/match-rules/<int:rule_id>')
def match_rule_detail(rule_id: int):
    row = db.get_or_404(MatchRuleRow, rule_id)
    return jsonify(row.to_dict())


@rules_bp.route('/set-rules')
def list_set_rules():
    rules = SetRuleRow.query.order_by(SetRuleRow.name.asc()).all()
    return jsonify([rule.to_dict() for rule in rules])


@rules_bp.route('/match-rules/<int:rule_id>/results', methods=['POST'])
def check_results(rule_id: int):
    """Assign set points to the submitted sets and validate them against the rules."""
    match_rule = db.get_or_404(MatchRuleRow, rule_id).to_rule()

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _bad_request('Expected a JSON object')

    sets_text = payload.get('sets')
    if not isinstance(sets_text, str):
        return _bad_request("'sets' must be a string like '25:23 23:25 15:10'")

    set_rule_id = payload.get('set_rule_id')
    if set_rule_id is None:
        set_rule = SetRule()
    elif isinstance(set_rule_id, int) and not isinstance(set_rule_id, bool):
        set_rule = db.get_or_404(SetRuleRow, set_rule_id).to_rule()
    else:
        return _bad_request("'set_rule_id' must be an integer")

    try:
        sets = parse_sets(sets_text)
    except InvalidSetResult as exc:
        return _bad_request(str(exc))

    calculate_sets_points(sets, set_rule, match_rule)
    validator = SetsValidator(sets, match_rule, set_rule)
    validator.check()
    failed = validator.failed_facts()
    valid = not failed

    if valid:
        current_app.logger.info('Result %s accepted for match rule %s', sets_text, rule_id)
    else:
        current_app.logger.info(
            'Result %s rejected for match rule %s: %s',
            sets_text,
            rule_id,
            ', '.join(fact.id.value for fact in failed),
        )

    response = {
        'valid': valid,
        'errors': [{'fact': fact.id.value, 'message': fact.message} for fact in failed],
        'single_set_errors': [
            {'sequence_no': error.sequence_no, 'fact': error.fact_id.value, 'message': error.message}
            for error in validator.single_set_errors
        ],
        'sets': [set_result.to_dict() for set_result in sets],
        'sets_won': str(get_sets_won(sets)),
        'set_points': str(get_set_points(sets)),
        'total_ball_points': get_total_ball_points(sets),
        'match_points': str(calculate_match_points(sets, match_rule)),
        'is_overruled': is_match_overruled(sets),
        'notification': EmailTemplate.RESULT_ENTERED_TXT.value if valid else None,
    }
    return jsonify(response), 200 if valid else 422
