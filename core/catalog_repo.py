"""
Catalog repository - loads the word list for a run.

Sources:
- JSON file: an array of {id, text|hebrew, translation}
- MongoDB: lexicon documents mapped onto WordRecord

The catalog is read once at startup and never changes during a run.
Every failure is reported as CatalogLoadError.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from core import settings
from core.drill.errors import CatalogLoadError
from core.schemas import WordRecord

logger = logging.getLogger(__name__)


def parse_catalog(entries: object) -> list[WordRecord]:
    """
    Validate raw catalog entries.

    Args:
        entries: Decoded JSON (must be a list of objects)

    Returns:
        List of WordRecord in catalog order

    Raises:
        CatalogLoadError: not a list, an invalid entry, or a duplicate id
    """
    if not isinstance(entries, list):
        raise CatalogLoadError(f"Catalog must be a list, got {type(entries).__name__}")

    words: list[WordRecord] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            word = WordRecord.model_validate(entry)
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid catalog entry #{index}: {exc}") from exc
        if word.id in seen:
            raise CatalogLoadError(f"Duplicate word id in catalog: {word.id}")
        seen.add(word.id)
        words.append(word)

    return words


def load_catalog_file(path: Path | str) -> list[WordRecord]:
    """
    Load the catalog from a JSON file.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            entries = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Could not load {path}: {exc}") from exc

    words = parse_catalog(entries)
    logger.info("Loaded %d words from %s", len(words), path)
    return words


def _document_to_entry(doc: dict) -> dict:
    translation = doc.get("translation")
    if not translation and doc.get("translations"):
        translation = doc["translations"][0]
    return {
        "id": doc.get("word_id") or doc.get("id") or str(doc.get("_id", "")),
        "text": doc.get("text") or doc.get("lemma"),
        "translation": translation,
    }


def load_catalog_mongo(
    mongo_uri: str,
    db_name: str,
    collection_name: str,
    client: Optional[MongoClient] = None
) -> list[WordRecord]:
    """
    Load the catalog from a MongoDB collection.

    Documents are read in natural order. ``word_id``/``lemma`` and
    ``translations[0]`` are accepted in place of ``id``/``text``/``translation``.

    Args:
        mongo_uri: Connection string (ignored when client is given)
        db_name: Database name
        collection_name: Collection name
        client: Existing client to reuse
    """
    owns_client = client is None
    try:
        if client is None:
            client = MongoClient(mongo_uri, serverSelectionTimeoutMS=5000)
        documents = list(client[db_name][collection_name].find({}))
    except PyMongoError as exc:
        raise CatalogLoadError(f"Could not read {db_name}.{collection_name}: {exc}") from exc
    finally:
        if owns_client and client is not None:
            client.close()

    words = parse_catalog([_document_to_entry(doc) for doc in documents])
    logger.info("Loaded %d words from %s.%s", len(words), db_name, collection_name)
    return words


def load_catalog() -> list[WordRecord]:
    """
    Load the catalog from the configured source.
    """
    try:
        source = settings.get_catalog_source()
        if source == "mongo":
            mongo_uri, db_name, collection_name = settings.get_mongo_settings()
            return load_catalog_mongo(mongo_uri, db_name, collection_name)
    except ValueError as exc:
        raise CatalogLoadError(str(exc)) from exc

    return load_catalog_file(settings.get_words_file())
