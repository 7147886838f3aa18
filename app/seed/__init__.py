"""Seed data preparation for the mock data service."""
from app.seed.denormalize import denormalize, load_nested_places, write_seed_file

__all__ = ["denormalize", "load_nested_places", "write_seed_file"]
