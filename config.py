import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')

    # Server Settings
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '8080'))

    # Database Settings - one SQLite file per collection, built from DATA_DIR
    DATA_DIR = os.environ.get('DATA_DIR', os.path.join(BASE_DIR, 'data'))
    COLLECTION_FILES = {
        'services': 'services.db',
        'portfolio': 'portfolio.db',
        'contacts': 'contacts.db',
    }
    SQLALCHEMY_BINDS = None
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'timeout': 15},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload Settings
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'public', 'uploads'))
    UPLOAD_FIELD = 'myFile1'
    MAX_UPLOAD_SIZE = 2 * 1024 * 1024  # 2MB per attachment
    MAX_CONTENT_LENGTH = 4 * 1024 * 1024  # whole request

    # Front-end Settings
    FRONTEND_DIST = os.environ.get('FRONTEND_DIST', os.path.join(BASE_DIR, 'public'))
    CONTACT_ADMIN_PAGE = '/showContact.html'
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging Settings
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    # In-memory collections unless a test points DATA_DIR at real files
    SQLALCHEMY_BINDS = {
        'services': 'sqlite:///:memory:',
        'portfolio': 'sqlite:///:memory:',
        'contacts': 'sqlite:///:memory:',
    }
    # Keep engine options empty for SQLite's StaticPool
    SQLALCHEMY_ENGINE_OPTIONS = {}


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])


def build_collection_binds(data_dir, collection_files):
    """SQLALCHEMY_BINDS mapping each collection to its own SQLite file"""
    return {
        name: 'sqlite:///' + os.path.join(os.path.abspath(data_dir), filename)
        for name, filename in collection_files.items()
    }
