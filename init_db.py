"""
Database initialization script
Run with: python init_db.py
"""

from app import create_app


def initialize_database():
    """Create the tables and seed the default rules"""
    app = create_app()
    app.logger.info('Default match and set rules are in place')


if __name__ == "__main__":
    initialize_database()
