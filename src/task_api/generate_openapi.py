"""
Utility script to generate and write the OpenAPI schema for the service.

The schema is produced from the same application factory the server uses, so
API clients and documentation tools can consume a stable document without
running the server.

Usage:
    python -m task_api.generate_openapi [OUTPUT_PATH]

Notes:
- Default output path is interfaces/openapi.json under the current directory.
- The script ensures every tag in openapi_tags is present in the document.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .main import create_app, openapi_tags

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("interfaces") / "openapi.json"


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the OpenAPI schema contains the expected tags metadata. Existing
    tag definitions are left as they are.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(out_path: Path = DEFAULT_OUTPUT) -> Path:
    """Write the OpenAPI schema to out_path, creating directories as needed, and return the path."""
    schema = create_app().openapi()
    _ensure_tags(schema)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to: %s", out_path)
    return out_path


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Write the service's OpenAPI schema to a file.")
    parser.add_argument("output", nargs="?", type=Path, default=DEFAULT_OUTPUT, help="Output JSON path")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    generate_openapi(args.output)


if __name__ == "__main__":
    main()
