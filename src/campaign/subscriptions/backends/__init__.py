"""Mailing lists persistence backends module."""
