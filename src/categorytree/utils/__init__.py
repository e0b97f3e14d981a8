"""Utility functions for categorytree."""

from categorytree.utils.cell_parser import (
    is_blank,
    parse_row_id,
    parse_name,
    parse_parent_id,
)

__all__ = ["is_blank", "parse_row_id", "parse_name", "parse_parent_id"]
