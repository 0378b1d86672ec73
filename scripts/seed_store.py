#!/usr/bin/env python3
"""
Seed the development store with products from a JSON file and make sure the
demo employee exists.

Accepted shapes: a list of products, or an object with an ``items`` list.
Entries may use either ``nome/descricao/preco`` or ``name/description/price``.

Usage:
    python scripts/seed_store.py --file produtos.json [--reset]
"""
import argparse
import json
import os
import sys

from treko.db import SessionLocal, init_db
from treko.repositories.employee_repo import EmployeeRepository
from treko.repositories.product_repo import ProductRepository


def _normalize_entry(entry):
    """Return {nome, descricao, preco} or None when the entry has no usable name/price."""
    nome = (entry.get("nome") or entry.get("name") or "").strip()
    descricao = entry.get("descricao") or entry.get("description") or None
    raw_price = entry.get("preco", entry.get("price", 0))
    try:
        preco = float(raw_price)
    except (TypeError, ValueError):
        preco = 0.0
    if not nome or preco <= 0:
        return None
    return {"nome": nome, "descricao": descricao, "preco": preco}


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    if isinstance(data, dict):
        source_list = data.get("items") if isinstance(data.get("items"), list) else list(data.values())
    elif isinstance(data, list):
        source_list = data
    else:
        source_list = []

    entries = []
    skipped = 0
    for entry in source_list:
        norm = _normalize_entry(entry) if isinstance(entry, dict) else None
        if norm:
            entries.append(norm)
        else:
            skipped += 1
    if skipped:
        print(f"Skipped {skipped} entries without a name or a positive price.")
    return entries


def seed(path: str = None, reset: bool = False) -> int:
    init_db(reset=reset)
    entries = load_entries(path) if path else None

    db = SessionLocal()
    try:
        created = ProductRepository(db).ensure_demo(entries)
        EmployeeRepository(db).ensure_demo()
        db.commit()
        print("Seeded products:", created)
        return created
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=None, help="Path to a product JSON list (defaults to the demo products)")
    parser.add_argument("--reset", action="store_true", help="drop and recreate the tables first")
    args = parser.parse_args()
    if args.file and not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    seed(args.file, reset=args.reset)
