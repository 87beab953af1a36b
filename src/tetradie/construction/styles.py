"""Die style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from tetradie.model import DieStyle


def save_style(path: str | Path, style: DieStyle) -> None:
    """Save a die style to a JSON file.

    Only fields that differ from the defaults are written.  The file
    is human-readable with two-space indentation.
    """
    Path(path).write_text(json.dumps(style.to_dict(), indent=2) + "\n")


def load_style(path: str | Path) -> DieStyle:
    """Load a die style from a JSON file.

    Missing fields take their default values.

    Raises:
        ValueError: If the file does not hold a JSON object or has
            keys that are not style fields.
        InvalidConfigurationError: If a value is out of range.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"die style file must hold a JSON object, got {type(data).__name__}"
        )
    return DieStyle.from_dict(data)
