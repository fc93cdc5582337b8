"""
Blueprints package for the league rules application
Contains the route blueprints for rule lookup and result checking
"""

from .rules import rules_bp

__all__ = ['rules_bp']
