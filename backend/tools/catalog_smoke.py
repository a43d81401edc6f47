import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import json

from catalog.client import CatalogClient, CatalogClientError

BASE = os.environ.get("CATALOG_BASE", "http://127.0.0.1:8000")

SAMPLE = {
    "name": "Pen",
    "description": "Blue pen",
    "price": 1.5,
    "category": "Office",
    "stock": 10,
}


def run_cycle(client):
    """create -> get -> update -> delete -> get; returns a list of step results."""
    steps = []
    created = client.create_product(SAMPLE)
    pid = created["id"]
    steps.append(("create", created))
    steps.append(("get", client.get_product(pid)))
    steps.append(("update", client.update_product(pid, {"stock": 0})))
    steps.append(("delete", client.delete_product(pid)))
    try:
        client.get_product(pid)
        steps.append(("get-after-delete", "UNEXPECTED: still present"))
    except CatalogClientError as e:
        steps.append(("get-after-delete", {"status": e.status_code, "message": e.message}))
    return steps


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Smoke test a running catalogue API.")
    parser.add_argument("--base", default=BASE)
    parser.add_argument("--prefix", default="", help="API prefix, e.g. /api")
    args = parser.parse_args()

    client = CatalogClient(args.base, prefix=args.prefix)
    print(f"Running smoke cycle against {args.base}{args.prefix}")
    for name, result in run_cycle(client):
        print(f"{name}: {json.dumps(result, default=str)}")
