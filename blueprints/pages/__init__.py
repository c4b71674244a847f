"""
Pages Blueprint - Front-end bundle and health check
Handles: Static assets, application shell fallback, health
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
