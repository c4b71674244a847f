"""
Portfolio Routes - Portfolio gallery API
"""

from flask import jsonify
from utils.data import get_stores
from utils.validation import require_json_object
from utils.helpers import get_request_payload
from . import portfolio_bp


@portfolio_bp.route('/portfolio', methods=['GET'])
def list_portfolio():
    return jsonify(get_stores().portfolio.find_all())


@portfolio_bp.route('/portfolio', methods=['POST'])
def add_portfolio_item():
    """Add a portfolio item (title, description, media reference)"""
    payload = require_json_object(get_request_payload())
    item = get_stores().portfolio.insert(payload)
    return jsonify({'success': True, 'data': item})
