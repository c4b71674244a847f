"""
Services Routes - Service offerings API
Handles: Listing and adding services
"""

from flask import jsonify
from utils.data import get_stores
from utils.helpers import get_request_payload
from utils.validation import require_json_object
from . import services_bp


@services_bp.route('/services', methods=['GET'])
def list_services():
    """List all services"""
    return jsonify(get_stores().services.find_all())


@services_bp.route('/services', methods=['POST'])
def add_service():
    """Add a new service (name, price, description)"""
    payload = require_json_object(get_request_payload())
    service = get_stores().services.insert(payload)
    return jsonify({'success': True, 'data': service})
