"""
Utils Package - Centralized utility modules initialization
"""

from .data import RecordStore, RecordStores, create_record_stores, get_stores
from .errors import (
    PortfolioError,
    ValidationError,
    NotFoundError,
    StorageError,
    UploadError,
    FileTooLargeError
)
from .validation import validate_contact, coerce_service_price, require_json_object
from .helpers import get_request_payload, save_upload, check_upload_size, discard_upload
from .nedb import read_datafile, import_collection
from .logging_config import setup_logging

__all__ = [
    # Data
    'RecordStore',
    'RecordStores',
    'create_record_stores',
    'get_stores',

    # Errors
    'PortfolioError',
    'ValidationError',
    'NotFoundError',
    'StorageError',
    'UploadError',
    'FileTooLargeError',

    # Validation
    'validate_contact',
    'coerce_service_price',
    'require_json_object',

    # Helpers
    'get_request_payload',
    'save_upload',
    'check_upload_size',
    'discard_upload',

    # NeDB import
    'read_datafile',
    'import_collection',

    # Logging
    'setup_logging'
]
