"""Writes the assembled specification as JSON or YAML."""

import json
from pathlib import Path

import yaml

from nextjs_openapi.generator.assembler import SpecificationDocument

YAML_SUFFIXES = (".yaml", ".yml")


def dump_spec(document: SpecificationDocument, fmt: str = "json") -> str:
    """Serialize the document; ``fmt`` is ``json`` or ``yaml``."""
    data = document.model_dump()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_spec(path: Path, document: SpecificationDocument) -> None:
    """Write the document, choosing YAML for .yaml/.yml paths."""
    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_spec(document, fmt), encoding="utf-8")
