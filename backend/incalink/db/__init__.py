"""Database Package - SQLAlchemy declarative base shared by all models."""
