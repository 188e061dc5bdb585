"""Shared utilities — text rendering and other cross-cutting helpers.

Rules
-----
* No parsing logic.
* No I/O.
* Importable by any layer.
"""
