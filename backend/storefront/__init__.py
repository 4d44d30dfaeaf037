"""Storefront Application Package: users/products read API with account flows.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
