"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern: the JSON API for services, portfolio items and
contacts, plus the built front-end served as static files.

Run the development server with ``python app.py``; under a WSGI server use
``gunicorn 'app:create_app()'``.
"""

import os
from flask import Flask, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from config import get_config, build_collection_binds
from extensions import db
from utils.data import create_record_stores
from utils.errors import PortfolioError
from utils.logging_config import setup_logging

# Import all blueprints
from blueprints.contact import contact_bp
from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp
from blueprints.services import services_bp


def create_app(config_name=None, overrides=None, stores=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        overrides (dict): Config values applied after the environment config
        stores (RecordStores): Pre-built record stores (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    # The front-end bundle is served by the pages blueprint
    app = Flask(__name__, static_folder=None)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config.get('LOG_LEVEL', 'INFO'), app.config.get('LOG_FILE'))

    # Each collection gets its own database file
    if not app.config.get('SQLALCHEMY_BINDS'):
        os.makedirs(app.config['DATA_DIR'], exist_ok=True)
        app.config['SQLALCHEMY_BINDS'] = build_collection_binds(
            app.config['DATA_DIR'], app.config['COLLECTION_FILES'])

    # Initialize extensions with app
    initialize_extensions(app, stores)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    return app


def initialize_extensions(app, stores=None):
    """Initialize Flask extensions and the record stores"""
    db.init_app(app)

    # Create collection tables if they don't exist; there is no default bind
    collections = list(app.config['SQLALCHEMY_BINDS'])
    with app.app_context():
        try:
            db.create_all(bind_key=collections)
            app.logger.info(f"✓ Collections initialized: {', '.join(collections)}")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")

    app.extensions['record_stores'] = stores if stores is not None else create_record_stores()


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(services_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(contact_bp)
    # Catch-all front-end routes go last
    app.register_blueprint(pages_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(PortfolioError)
    def portfolio_error(e):
        if e.status_code >= 500:
            app.logger.error(f"{request.method} {request.path} failed: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({'success': False, 'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'success': False, 'message': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def file_too_large(e):
        limit = app.config['MAX_UPLOAD_SIZE'] // (1024 * 1024)
        return jsonify({'success': False, 'message': f'File is too large. Maximum size is {limit}MB.'}), 413

    @app.errorhandler(500)
    def internal_server_error(e):
        original = getattr(e, 'original_exception', None) or e
        app.logger.error(f"Server Error: {str(original)}")
        return jsonify({'success': False, 'message': 'Server Error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_cors_headers(response):
        """Let the front-end dev server call the API from another origin"""
        response.headers['Access-Control-Allow-Origin'] = app.config['CORS_ORIGINS']
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response

    @app.after_request
    def log_failed_requests(response):
        if response.status_code >= 400:
            app.logger.info(f"{request.method} {request.path} - {response.status_code}")
        return response


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    # Run development server
    app.run(
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config.get('DEBUG', False)
    )
