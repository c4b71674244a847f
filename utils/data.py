"""
Data Management Module - Record stores for services, portfolio items and contacts
Each collection is persisted through its own SQLAlchemy bind (one SQLite file
per collection). Stores are built once by the app factory and looked up by
handlers through get_stores().
"""

from datetime import datetime, timezone
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import COLLECTION_MODELS
from .errors import StorageError


RESERVED_KEYS = ('id', '_id')


class RecordStore:
    """
    Insert / find / find-by-id / remove over one collection

    Args:
        name (str): Collection name, used in log lines
        model: SQLAlchemy model holding the documents
        session: SQLAlchemy session (db.session by default)
        timestamp_field (str, optional): Document key stamped with the
            insertion time on every insert
    """

    def __init__(self, name, model, session=None, timestamp_field=None):
        self.name = name
        self.model = model
        self.session = session if session is not None else db.session
        self.timestamp_field = timestamp_field

    def __repr__(self):
        return f"<RecordStore {self.name}>"

    def insert(self, record):
        """Persist a copy of record under a freshly generated id and return it"""
        document = {k: v for k, v in dict(record).items() if k not in RESERVED_KEYS}
        if self.timestamp_field:
            document[self.timestamp_field] = datetime.now(timezone.utc).isoformat()

        row = self.model(doc=document)
        try:
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail('insert', e)

        current_app.logger.info(f"Inserted record {row.id} into {self.name}")
        return self._to_record(row)

    def find_all(self, filters=None):
        """All records equal to filters on every given key, in insertion order"""
        try:
            rows = self.session.query(self.model).order_by(self.model.seq).all()
        except SQLAlchemyError as e:
            self._fail('find', e)

        records = [self._to_record(row) for row in rows]
        if filters:
            records = [r for r in records
                       if all(k in r and r[k] == v for k, v in filters.items())]
        return records

    def find_by_id(self, record_id):
        """Return the record or None when no record has this id"""
        try:
            row = self.session.query(self.model).filter_by(id=str(record_id)).first()
        except SQLAlchemyError as e:
            self._fail('find', e)
        return self._to_record(row) if row else None

    def remove(self, record_id):
        """Delete at most one record; returns the number removed (0 or 1)"""
        try:
            removed = self.session.query(self.model).filter_by(id=str(record_id)).delete()
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail('remove', e)

        if removed:
            current_app.logger.info(f"Removed record {record_id} from {self.name}")
        return min(removed, 1)

    def count(self):
        try:
            return self.session.query(self.model).count()
        except SQLAlchemyError as e:
            self._fail('count', e)

    def _fail(self, operation, error):
        self.session.rollback()
        current_app.logger.error(f"Error during {operation} on {self.name}: {str(error)}")
        raise StorageError() from error

    @staticmethod
    def _to_record(row):
        record = {'id': row.id}
        record.update(row.doc or {})
        return record


class RecordStores:
    """Container for the three collection stores of one application"""

    def __init__(self, services, portfolio, contacts):
        self.services = services
        self.portfolio = portfolio
        self.contacts = contacts

    def items(self):
        return [('services', self.services),
                ('portfolio', self.portfolio),
                ('contacts', self.contacts)]


def create_record_stores(session=None):
    """Build the stores once per application"""
    return RecordStores(
        services=RecordStore('services', COLLECTION_MODELS['services'], session),
        portfolio=RecordStore('portfolio', COLLECTION_MODELS['portfolio'], session),
        contacts=RecordStore('contacts', COLLECTION_MODELS['contacts'], session,
                             timestamp_field='createdAt'),
    )


def get_stores():
    """Stores registered on the current application by create_app"""
    return current_app.extensions['record_stores']
