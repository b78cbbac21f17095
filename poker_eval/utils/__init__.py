"""Shared utilities."""

from .seeding import set_seed, make_generator

__all__ = ["set_seed", "make_generator"]
