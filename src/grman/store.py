"""Grammar dump loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .errors import GrammarLoadError
from .models import GrammarDump


def load_grammar(path: Path) -> GrammarDump:
    """Load and validate a JSON grammar dump.

    Raises GrammarLoadError when the file is missing, is not valid JSON or
    does not match the dump schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GrammarLoadError(f"Could not read grammar file {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GrammarLoadError(f"Invalid JSON in grammar file {path}: {exc}") from exc

    try:
        return GrammarDump.model_validate(data)
    except ValidationError as exc:
        raise GrammarLoadError(f"Invalid grammar file {path}: {exc}") from exc
