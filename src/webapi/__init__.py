"""Transactional JSON record service over PostgreSQL (cars, users, subscriptions)."""
