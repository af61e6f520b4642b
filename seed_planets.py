#!/usr/bin/env python3
"""
Seed the planets collection in MongoDB from a JSON file.

The API never writes planet records; this script is how they get
there.  The file must contain a JSON array of objects with the fields
``id``, ``name``, ``description``, ``image``, ``velocity`` and
``distance``.  Every record needs an integer ``id``; the file is
rejected before anything is written if one does not.

By default records are upserted on ``id``.  With ``--drop`` the
collection is emptied first.

Usage:
    python seed_planets.py --uri mongodb://localhost:27017/solar-system --file data/planets.json
    python seed_planets.py --file data/planets.json --drop --username admin

If --username is given without --password, you will be prompted for it.
"""

import argparse
import getpass
import json
import os
import sys
from typing import Any, Dict, List

from pymongo import MongoClient, ReplaceOne

DEFAULT_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/solar-system")


def load_records(path: str) -> List[Dict[str, Any]]:
    """Read and validate planet records from ``path``.

    Raises ``ValueError`` if the file is not a JSON array of objects
    each carrying an integer ``id``.
    """
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError("expected a JSON array of planet records")
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"record {index} is not an object")
        planet_id = record.get("id")
        # bool is an int subclass
        if not isinstance(planet_id, int) or isinstance(planet_id, bool):
            raise ValueError(f"record {index} has no integer id")
    return records


def seed(collection, records: List[Dict[str, Any]], drop: bool = False) -> int:
    """Write ``records`` to ``collection`` and return how many were written."""
    if drop:
        collection.delete_many({})
    if not records:
        return 0
    ops = [ReplaceOne({"id": record["id"]}, record, upsert=True) for record in records]
    result = collection.bulk_write(ops)
    return result.upserted_count + result.matched_count


def main(argv=None):
    ap = argparse.ArgumentParser(description="Seed the planets collection (MongoDB).")
    ap.add_argument("--uri", default=DEFAULT_URI, help="MongoDB URI (default: $MONGO_URI)")
    ap.add_argument("--file", required=True, help="Path to a JSON array of planet records")
    ap.add_argument("--database", default=None, help="Database name (default: the one in the URI)")
    ap.add_argument("--collection", default="planets", help="Collection name (default: planets)")
    ap.add_argument("--username", default=os.getenv("MONGO_USERNAME"), help="MongoDB user")
    ap.add_argument("--password", default=os.getenv("MONGO_PASSWORD"), help="MongoDB password")
    ap.add_argument("--drop", action="store_true", help="Delete existing records first")
    args = ap.parse_args(argv)

    if not os.path.exists(args.file):
        print(f"[!] File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    try:
        records = load_records(args.file)
    except ValueError as exc:
        print(f"[!] Invalid planet file {args.file}: {exc}", file=sys.stderr)
        sys.exit(1)

    options: Dict[str, Any] = {}
    if args.username:
        options["username"] = args.username
        options["password"] = args.password or getpass.getpass("MongoDB password: ")

    client = MongoClient(args.uri, **options)
    try:
        db = client[args.database] if args.database else client.get_default_database(default="solar-system")
        written = seed(db[args.collection], records, drop=args.drop)
        print(f"[+] Seeded {written} planet(s) into {db.name}.{args.collection}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
