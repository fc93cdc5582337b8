import logging
import os

from flask import Flask, jsonify

from blueprints.rules import rules_bp
from models import db, init_default_data

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def database_uri() -> str:
    """Database URI from the environment - supports both local SQLite and remote PostgreSQL"""
    database_url = os.environ.get('DATABASE_URL')
    if database_url:
        # postgres:// is not accepted by SQLAlchemy
        if database_url.startswith('postgres://'):
            database_url = database_url.replace('postgres://', 'postgresql://', 1)
        return database_url

    default_sqlite_dir = os.path.join(BASE_DIR, 'instance')
    sqlite_path = os.environ.get('SQLITE_PATH', os.path.join(default_sqlite_dir, 'league.db'))
    return f'sqlite:///{sqlite_path}'


def create_app(test_config: dict | None = None) -> Flask:
    """Build the league rules application. ``test_config`` overrides the environment based settings."""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'league-rules')
    app.config['SQLALCHEMY_DATABASE_URI'] = database_uri()
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    if test_config:
        app.config.update(test_config)

    uri = app.config['SQLALCHEMY_DATABASE_URI']
    if not uri.startswith('sqlite'):
        app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {'pool_pre_ping': True, 'pool_recycle': 300})
    elif uri.startswith('sqlite:///') and uri != 'sqlite:///:memory:':
        os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)

    if not app.debug and not app.testing:
        app.logger.setLevel(logging.INFO)

    db.init_app(app)

    with app.app_context():
        db.create_all()
        init_default_data()
        app.logger.info('Database initialized at %s', uri)

    app.register_blueprint(rules_bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    return app


if __name__ == "__main__":
    create_app().run(debug=True, port=5000)
