"""
Services Blueprint - Service offerings API
Handles: Listing and adding services
"""

from flask import Blueprint

services_bp = Blueprint('services', __name__, url_prefix='')

from . import routes
