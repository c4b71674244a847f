"""
Pages Routes - Front-end bundle and health check
The built single-page application is served from FRONTEND_DIST; any GET path
that is not an API route or an existing asset gets the application shell.
"""

import os
from flask import send_from_directory, current_app
from werkzeug.security import safe_join
from utils.data import get_stores
from . import pages_bp


SHELL_FILE = 'index.html'


@pages_bp.route('/health')
def health_check():
    """Health check with per-collection record counts"""
    counts = {name: store.count() for name, store in get_stores().items()}
    return {'status': 'ok', 'collections': counts}, 200


@pages_bp.route('/', defaults={'path': ''})
@pages_bp.route('/<path:path>')
def frontend(path):
    """Serve a built asset, or the application shell for client-side routes"""
    dist = current_app.config['FRONTEND_DIST']

    if path:
        asset = safe_join(dist, path)
        if asset and os.path.isfile(asset):
            return send_from_directory(dist, path)

    if not os.path.isfile(os.path.join(dist, SHELL_FILE)):
        current_app.logger.error(f"Application shell not found in {dist}")
        return 'Front-end application shell not found', 500, {'Content-Type': 'text/plain; charset=utf-8'}

    return send_from_directory(dist, SHELL_FILE)
