"""Core Layer - error hierarchy and boundary protocols.

Invariants:
    - Core never imports from infrastructure or api
"""
