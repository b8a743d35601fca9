"""
YAML loader utility for LessonDeck.

Reads the authored catalog and lesson files.
"""

from pathlib import Path
from typing import Any
import yaml


def load_yaml(file_path: Path) -> Any:
    """
    Load one YAML document.

    Args:
        file_path: Path to a .yaml file

    Returns:
        The parsed document (an empty file yields None)

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Content file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def get_available_files(dir_path: Path) -> list[str]:
    """
    List YAML documents in a directory.

    Returns:
        Sorted file stems (without .yaml extension)
    """
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
