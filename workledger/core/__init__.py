"""Core Layer: pure domain logic for the record registry.

Invariants:
    - Core never imports from shell (models, services, infrastructure, api)
    - No IO: every function here is deterministic given its arguments
"""
