"""Transactional notifications tied to subscription changes."""
