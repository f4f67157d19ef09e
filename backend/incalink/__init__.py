"""Incalink Package - group records over a REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
