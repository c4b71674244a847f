"""
Contact Blueprint - Contact submissions
Handles: JSON and legacy form submissions, attachments, listing and deletion
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='')

from . import routes
