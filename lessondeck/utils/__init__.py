"""LessonDeck utilities."""

from .yaml_loader import load_yaml, get_available_files

__all__ = ["load_yaml", "get_available_files"]
