"""Auto-detect the format of an endpoint declaration file."""

from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of a declaration file.

    Returns: 'yaml' or 'text'.
    """
    text = file_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return "text"

    if isinstance(data, list) and all(isinstance(item, str) for item in data):
        return "yaml"
    if isinstance(data, dict) and all(isinstance(value, str) for value in data.values()):
        return "yaml"

    return "text"
