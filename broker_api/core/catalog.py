"""Service catalog source.

The catalog is an Open Service Broker catalog document. It is either read
from a JSON file or taken from the built-in default below.
"""
from __future__ import annotations
import copy
import json
from pathlib import Path
from typing import Any, Dict

DEFAULT_CATALOG: Dict[str, Any] = {
    "services": [
        {
            "id": "6c2ed0ef-2a25-4b5d-b1c5-6d4a2f0f4a11",
            "name": "memory-store",
            "description": "In-memory key/value store for development",
            "bindable": True,
            "tags": ["memory", "dev"],
            "metadata": {
                "displayName": "Memory Store",
                "providerDisplayName": "Broker API",
            },
            "plans": [
                {
                    "id": "0a9e6a2c-6b1f-4a8e-9a9c-2e8e6f7f1c01",
                    "name": "shared",
                    "description": "Shared in-memory instance",
                    "free": True,
                }
            ],
        }
    ]
}


class CatalogError(ValueError):
    """Catalog document is unreadable or does not have the expected shape."""
    pass


def default_catalog() -> Dict[str, Any]:
    """Return a fresh copy of the built-in catalog."""
    return copy.deepcopy(DEFAULT_CATALOG)


def load_catalog(path: str | Path) -> Dict[str, Any]:
    """Load a catalog document from a JSON file.

    Args:
        path: Path to the catalog JSON file

    Returns:
        Parsed catalog (key order preserved)

    Raises:
        CatalogError: If the file is missing, not JSON, or lacks a services list
    """
    catalog_file = Path(path)
    try:
        document = json.loads(catalog_file.read_text())
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog file {catalog_file}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {catalog_file} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise CatalogError("Catalog must be a JSON object")
    if not isinstance(document.get("services"), list):
        raise CatalogError("Catalog must contain a 'services' list")

    return document
