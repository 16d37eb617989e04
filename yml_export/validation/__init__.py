"""Catalog consistency checks (warnings only)."""

from .reference_checker import check_references

__all__ = ['check_references']
