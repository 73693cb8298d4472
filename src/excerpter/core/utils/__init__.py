"""Shared helpers."""
from .merge import deep_merge, merge_arrays

__all__ = ["deep_merge", "merge_arrays"]
