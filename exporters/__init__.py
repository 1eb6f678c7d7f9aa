"""Exporters for converting graph to output formats."""

from .json_exporter import to_dict, to_json

__all__ = ["to_dict", "to_json"]
