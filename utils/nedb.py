"""
NeDB Module - Reader for datafiles written by the original Node server

A NeDB datafile is newline-delimited JSON. Later lines supersede earlier lines
with the same _id, {"_id": ..., "$$deleted": true} removes a document, and
lines describing indexes ($$indexCreated / $$indexRemoved) carry no data.
Dates are stored as {"$$date": <epoch milliseconds>}.
"""

import json
import logging
from datetime import datetime, timezone


logger = logging.getLogger(__name__)


def _decode_dates(obj):
    if set(obj) == {'$$date'}:
        try:
            return datetime.fromtimestamp(obj['$$date'] / 1000, tz=timezone.utc).isoformat()
        except (TypeError, ValueError, OverflowError, OSError):
            return obj
    return obj


def parse_datafile(lines):
    """
    Replay datafile lines into the surviving documents

    Returns:
        tuple: (documents in order of first appearance, number of corrupt lines)
    """
    documents = {}
    corrupt = 0

    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            doc = json.loads(line, object_hook=_decode_dates)
        except json.JSONDecodeError:
            corrupt += 1
            continue
        if not isinstance(doc, dict):
            corrupt += 1
            continue

        if '$$indexCreated' in doc or '$$indexRemoved' in doc:
            continue
        doc_id = doc.get('_id')
        if doc_id is None:
            corrupt += 1
            continue
        if doc.get('$$deleted') is True:
            documents.pop(doc_id, None)
        else:
            documents[doc_id] = doc

    return list(documents.values()), corrupt


def read_datafile(path):
    """Read a datafile from disk; a missing file yields no documents"""
    try:
        with open(path, 'r', encoding='utf-8') as file:
            return parse_datafile(file)
    except FileNotFoundError:
        logger.warning(f"NeDB datafile not found: {path}")
        return [], 0


def import_collection(store, path):
    """Insert every surviving document of a datafile into store"""
    documents, corrupt = read_datafile(path)
    if corrupt:
        logger.warning(f"Skipped {corrupt} corrupt line(s) in {path}")

    for doc in documents:
        store.insert(doc)

    logger.info(f"Imported {len(documents)} document(s) from {path} into {store.name}")
    return len(documents)
