import pytest
from sqlalchemy.exc import SQLAlchemyError

from app import create_app
from extensions import db
from utils.data import get_stores


SHELL_HTML = '<!DOCTYPE html><html><body><div id="app"></div></body></html>'


@pytest.fixture
def app_factory(tmp_path):
    """Build apps whose collections, uploads and front-end live under tmp_path"""
    dist = tmp_path / 'public'
    (dist / 'assets').mkdir(parents=True)
    (dist / 'index.html').write_text(SHELL_HTML, encoding='utf-8')
    (dist / 'assets' / 'main.js').write_text('console.log("app")', encoding='utf-8')

    created = []

    def factory(stores=None, **overrides):
        config = {
            'SQLALCHEMY_BINDS': None,
            'DATA_DIR': str(tmp_path / 'data'),
            'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
            'FRONTEND_DIST': str(dist),
        }
        config.update(overrides)
        app = create_app('testing', overrides=config, stores=stores)
        created.append(app)
        return app

    yield factory

    for app in created:
        with app.app_context():
            db.session.remove()
            for engine in db.engines.values():
                engine.dispose()


@pytest.fixture
def app(app_factory):
    return app_factory()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def stores(app):
    with app.app_context():
        yield get_stores()


class BrokenSession:
    """Session whose every database call fails like a lost disk"""

    def __init__(self):
        self.rolled_back = False

    def add(self, obj):
        pass

    def commit(self):
        raise SQLAlchemyError('disk I/O error')

    def query(self, model):
        raise SQLAlchemyError('disk I/O error')

    def rollback(self):
        self.rolled_back = True


@pytest.fixture
def broken_session():
    return BrokenSession()
