"""Load repository payloads produced by the upstream fetch stage.

Three input shapes are accepted:
- JSON array of repository payloads
- JSON array of workflow items wrapping each payload under "json"
- Enveloped JSONL, one record per line with the payload (or a page of
  payloads) under "data"
"""

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gh_repo_review.models import RawRepository

logger = logging.getLogger(__name__)

INPUT_FORMATS = ("auto", "json", "jsonl")


class InputFormatError(ValueError):
    """Input file does not contain repository payloads in a known shape."""


def load_repositories(path: Path, input_format: str = "auto") -> list[RawRepository]:
    """Load and validate repository payloads from a file.

    Args:
        path: JSON or JSONL file written by the fetch stage.
        input_format: One of "auto", "json" or "jsonl". "auto" selects JSONL
            for files with a .jsonl suffix and JSON otherwise.

    Returns:
        Repositories in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        InputFormatError: If the content is not a list of repository objects.
    """
    if input_format not in INPUT_FORMATS:
        msg = f"Unknown input format '{input_format}', expected one of {INPUT_FORMATS}"
        raise InputFormatError(msg)

    if not path.exists():
        msg = f"Input file not found: {path}"
        raise FileNotFoundError(msg)

    if input_format == "auto":
        input_format = "jsonl" if path.suffix == ".jsonl" else "json"

    if input_format == "jsonl":
        payloads = list(read_enveloped_jsonl(path))
    else:
        payloads = _read_json_array(path)

    repositories = [_validate(payload, f"{path}[{i}]") for i, payload in enumerate(payloads)]
    logger.info("Loaded %d repositories from %s", len(repositories), path)
    return repositories


def unwrap_items(items: Iterable[Any]) -> list[Any]:
    """Unwrap workflow items of the form {"json": {...}} to their payloads.

    Items without a "json" key are returned unchanged.
    """
    unwrapped = []
    for item in items:
        if isinstance(item, dict) and isinstance(item.get("json"), dict):
            unwrapped.append(item["json"])
        else:
            unwrapped.append(item)
    return unwrapped


def read_enveloped_jsonl(path: Path) -> Iterator[Any]:
    """Yield repository payloads from enveloped JSONL records.

    A record's "data" may hold a single repository or a page of them.
    Lines that are not valid JSON or lack "data" are logged and skipped.
    """
    with path.open(encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                envelope = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning("Invalid JSON at %s:%d: %s", path, line_num, e)
                continue

            data = envelope.get("data") if isinstance(envelope, dict) else None
            if data is None:
                logger.warning("Missing 'data' field in envelope at %s:%d", path, line_num)
                continue

            if isinstance(data, list):
                yield from data
            else:
                yield data


def _read_json_array(path: Path) -> list[Any]:
    with path.open(encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in {path}: {e}"
            raise InputFormatError(msg) from e

    if not isinstance(document, list):
        msg = f"Expected a JSON array of repositories in {path}, got {type(document).__name__}"
        raise InputFormatError(msg)

    return unwrap_items(document)


def _validate(payload: Any, location: str) -> RawRepository:
    if not isinstance(payload, dict):
        msg = f"Expected a repository object at {location}, got {type(payload).__name__}"
        raise InputFormatError(msg)
    try:
        return RawRepository.model_validate(payload)
    except ValidationError as e:
        msg = f"Invalid repository payload at {location}: {e}"
        raise InputFormatError(msg) from e
