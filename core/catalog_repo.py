"""
Catalog repository.

Loads term/definition catalogs from bundled CSV files or from a MongoDB
collection, and scopes them for a quiz session.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection

from core.schemas import CatalogItem

# Load environment
load_dotenv()

# Configuration
DEFAULT_CATALOG_DIR = Path(__file__).parent.parent / "data"
DB_NAME = "flashcard_quiz"
COLLECTION_NAME = "catalog_items"
REQUIRED_COLUMNS = ("id", "prompt", "answer")

# Global connection pool (reused across Streamlit reruns)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


class CatalogError(Exception):
    """Raised when a catalog cannot be loaded."""


# ---- Scoping ----

def scope_catalog(items: Sequence[CatalogItem], item_count: int) -> list[CatalogItem]:
    """
    Take the first item_count items of a catalog.
    """
    return list(items[:max(0, item_count)])


def storage_key(catalog_type: str, item_count: int) -> str:
    """
    Build the persistence key for a catalog scope, e.g. "kanji-5".
    """
    return f"{catalog_type}-{item_count}"


# ---- CSV Catalogs ----

def get_catalog_dir() -> Path:
    return Path(os.getenv("CATALOG_DIR", DEFAULT_CATALOG_DIR))


def load_catalog_csv(path: str | Path) -> list[CatalogItem]:
    """
    Load a catalog from a CSV file with id, prompt and answer columns.

    Rows with missing values are skipped; for duplicate ids the first row wins.

    Raises:
        CatalogError: file missing or required columns absent
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    df = pd.read_csv(path, dtype={"prompt": str, "answer": str})
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise CatalogError(f"Catalog {path.name} missing columns: {', '.join(missing)}")

    df = df.dropna(subset=list(REQUIRED_COLUMNS))
    df["id"] = pd.to_numeric(df["id"], errors="coerce")
    df = df.dropna(subset=["id"])
    df = df.drop_duplicates(subset="id", keep="first")

    return [
        CatalogItem(id=int(row.id), prompt=str(row.prompt).strip(), answer=str(row.answer).strip())
        for row in df.itertuples(index=False)
    ]


def load_bundled_catalog(catalog_type: str) -> list[CatalogItem]:
    """Load data/<catalog_type>.csv from the catalog directory."""
    return load_catalog_csv(get_catalog_dir() / f"{catalog_type}.csv")


# ---- MongoDB Catalogs ----

def get_collection() -> Collection:
    """
    Get a connection to the MongoDB catalog collection.

    Uses a persistent connection pool that's reused across requests.
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise CatalogError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    _collection = _client[DB_NAME][COLLECTION_NAME]
    return _collection


def load_catalog_mongo(
    catalog_type: str,
    collection: Optional[Collection] = None
) -> list[CatalogItem]:
    """
    Load a catalog from MongoDB documents {catalog_type, item_id, prompt, answer}.

    Args:
        catalog_type: Catalog to load (e.g., "kanji")
        collection: Collection to read; defaults to get_collection()

    Returns:
        Items sorted by item_id; incomplete documents are skipped
    """
    collection = collection if collection is not None else get_collection()
    cursor = collection.find(
        {"catalog_type": catalog_type},
        {"_id": 0, "item_id": 1, "prompt": 1, "answer": 1}
    ).sort("item_id", 1)

    items: list[CatalogItem] = []
    seen: set[int] = set()
    for doc in cursor:
        if doc.get("item_id") is None or not doc.get("prompt") or not doc.get("answer"):
            continue
        item_id = int(doc["item_id"])
        if item_id in seen:
            continue
        seen.add(item_id)
        items.append(CatalogItem(id=item_id, prompt=doc["prompt"], answer=doc["answer"]))
    return items


def load_catalog(catalog_type: str) -> list[CatalogItem]:
    """
    Load a catalog from the configured source (CATALOG_SOURCE: csv or mongo).
    """
    source = os.getenv("CATALOG_SOURCE", "csv").lower()
    if source == "mongo":
        return load_catalog_mongo(catalog_type)
    if source == "csv":
        return load_bundled_catalog(catalog_type)
    raise CatalogError(f"Unknown CATALOG_SOURCE: {source}")
