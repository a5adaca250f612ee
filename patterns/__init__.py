"""Reusable patterns the bookstore is built from.

Each module is self-contained: a pure-function rules engine, a dict-backed
repository and frozen-dataclass domain configuration.
"""
