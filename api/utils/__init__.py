"""Utility modules."""
from api.utils.json_utils import read_json_file, write_json_file

__all__ = [
    "read_json_file",
    "write_json_file",
]
