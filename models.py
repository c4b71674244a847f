from extensions import db
from datetime import datetime
import uuid


class DocumentMixin:
    """One free-form document per row; seq keeps insertion order"""
    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(36), unique=True, nullable=False, index=True,
                   default=lambda: str(uuid.uuid4()))
    doc = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


# Each collection lives in its own database file (see SQLALCHEMY_BINDS)
class ServiceDocument(DocumentMixin, db.Model):
    __bind_key__ = 'services'
    __tablename__ = 'services'


class PortfolioDocument(DocumentMixin, db.Model):
    __bind_key__ = 'portfolio'
    __tablename__ = 'portfolio'


class ContactDocument(DocumentMixin, db.Model):
    __bind_key__ = 'contacts'
    __tablename__ = 'contacts'


COLLECTION_MODELS = {
    'services': ServiceDocument,
    'portfolio': PortfolioDocument,
    'contacts': ContactDocument,
}
