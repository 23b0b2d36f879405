"""Shared helpers for reflection-weekly packages."""
