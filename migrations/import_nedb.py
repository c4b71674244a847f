"""
Migration Script: NeDB datafiles to collection databases
Imports Service.db, portfolio.db and contact.db written by the previous Node
server into the services, portfolio and contacts collections.

Usage:
    python migrations/import_nedb.py [NEDB_DIR]
"""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from utils.data import get_stores
from utils.nedb import import_collection


NEDB_FILES = {
    'services': 'Service.db',
    'portfolio': 'portfolio.db',
    'contacts': 'contact.db',
}


def migrate(source_dir, stores):
    """Import every NeDB datafile found in source_dir; returns counts per collection"""
    counts = {}
    for name, store in stores.items():
        path = os.path.join(source_dir, NEDB_FILES[name])
        if not os.path.exists(path):
            print(f"  [SKIP] {path} not found")
            counts[name] = 0
            continue
        counts[name] = import_collection(store, path)
        print(f"  [OK] {name}: {counts[name]} record(s)")
    return counts


def main():
    """Main migration function"""
    source_dir = sys.argv[1] if len(sys.argv) > 1 else os.environ.get('NEDB_DIR', '.')

    print("=" * 60)
    print("NeDB to Collection Database Migration Script")
    print("=" * 60)

    app = create_app()
    with app.app_context():
        print(f"\nImporting datafiles from {os.path.abspath(source_dir)}...")
        counts = migrate(source_dir, get_stores())

        print("\n" + "=" * 60)
        print(f"Migration completed: {sum(counts.values())} record(s) imported")
        print("=" * 60)


if __name__ == '__main__':
    main()
