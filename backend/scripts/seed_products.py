#!/usr/bin/env python3
"""
Seed the catalogue from a JSON file.

The file holds either a list of product entries or an object with an "items"
list. Each entry goes through the same validation as POST /products; invalid
entries are reported and skipped.

Usage:
    python scripts/seed_products.py --file catalog.json [--reset]
"""
import argparse
import json
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from catalog.db import SessionLocal, init_db
from catalog.services.product_service import ProductService, ValidationFailed

DEFAULT_SOURCE = os.path.join(os.path.dirname(__file__), "catalog.json")


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    if isinstance(data, dict) and isinstance(data.get("items"), list):
        return data["items"]
    if isinstance(data, list):
        return data
    return []


def seed_from_file(path: str, reset: bool = False):
    """Returns (created_ids, rejected) where rejected is [(index, details)]."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    entries = load_entries(path)
    init_db(reset=reset)

    created, rejected = [], []
    db = SessionLocal()
    try:
        svc = ProductService(db)
        for i, entry in enumerate(entries):
            try:
                p = svc.create_product(entry)
            except ValidationFailed as e:
                rejected.append((i, [d.model_dump() for d in e.details]))
                continue
            created.append(p.id)
    finally:
        db.close()
    return created, rejected


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=DEFAULT_SOURCE, help="Path to product json")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    created, rejected = seed_from_file(args.file, reset=args.reset)
    print("Seeded products:", len(created))
    for index, details in rejected:
        print(f"Entry {index} rejected:", details)
