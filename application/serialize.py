"""Taxonomy map text encoding (TOML and JSON)."""

import json
import logging
import tomllib
from typing import Any

import tomli_w
from pydantic import ValidationError

from domain.taxonomy import Advisories, DecodeError, IdentifierError, MapEntry, TaxonomyMap, TaxonomyPath
from infrastructure.config import TextFormat

logger = logging.getLogger(__name__)


def _to_plain(taxonomy_map: TaxonomyMap) -> dict[str, dict[str, Any]]:
    # Sorted paths keep parents ahead of children and diffs stable
    return {str(path): taxonomy_map.entries[path].model_dump(mode="json") for path in sorted(taxonomy_map.entries)}


def dump_taxonomy_map(taxonomy_map: TaxonomyMap, fmt: TextFormat) -> str:
    """
    Encode a taxonomy map as text. Each full path is a top-level key.

    TOML output quotes the path keys (`["parent/child"]`) so the separator
    survives as part of the key rather than creating nested tables.
    """
    plain = _to_plain(taxonomy_map)
    if fmt is TextFormat.TOML:
        return tomli_w.dumps(plain)
    if fmt is TextFormat.JSON:
        return json.dumps(plain, ensure_ascii=False, indent=2) + "\n"
    raise ValueError(f"Unsupported format: {fmt}")


def _decode(text: str, fmt: TextFormat) -> Any:
    if fmt is TextFormat.TOML:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DecodeError(fmt.value, str(e)) from e
    if fmt is TextFormat.JSON:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(fmt.value, str(e)) from e
    raise ValueError(f"Unsupported format: {fmt}")


def _describe_validation_error(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(x) for x in item.get("loc", ())) or "entry"
        parts.append(f"{loc}: {item.get('msg')}")
    return "; ".join(parts)


def parse_taxonomy_map(text: str, fmt: TextFormat, advisories: Advisories | None = None) -> TaxonomyMap:
    """
    Decode text into a TaxonomyMap.

    Args:
        text: Document text
        fmt: Encoding of `text`
        advisories: Optional sink for title-case advisories

    Returns:
        TaxonomyMap keyed by the parsed paths

    Raises:
        DecodeError: If the text is malformed, a key is not a valid path, or an
            entry has missing/unknown/invalid fields
    """
    data = _decode(text, fmt)
    if not isinstance(data, dict):
        raise DecodeError(fmt.value, f"expected a table of paths, got {type(data).__name__}")

    entries: dict[TaxonomyPath, MapEntry] = {}
    for key, value in data.items():
        try:
            path = TaxonomyPath.parse(key)
        except IdentifierError as e:
            raise DecodeError(fmt.value, str(e), key=key) from e
        try:
            entries[path] = MapEntry.model_validate(value, context={"advisories": advisories})
        except ValidationError as e:
            raise DecodeError(fmt.value, _describe_validation_error(e), key=key) from e

    logger.debug("Decoded %d %s entries", len(entries), fmt.value)
    return TaxonomyMap(entries=entries)
