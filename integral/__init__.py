"""Chess engine building blocks: types, sliding attacks, hashing and utilities."""

__version__ = "0.1.0"