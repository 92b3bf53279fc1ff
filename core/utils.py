# core/utils.py

"""
Repository for program-wide utilities.
"""

import json
import os
from typing import Any


def read_json(file_path: str) -> list[Any] | dict[str, Any]:
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(file_path: str, data: list | dict) -> None:
    """
    Serializes data to JSON and writes it to disk, creating parent directories as needed.

    Notes:
        - This intentionally overwrites existing data.
    """
    parent = os.path.dirname(file_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)


def normalize(text: str) -> str:
    return text.strip().lower()
