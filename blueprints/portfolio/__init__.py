"""
Portfolio Blueprint - Portfolio gallery API
Handles: Listing and adding portfolio items
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
