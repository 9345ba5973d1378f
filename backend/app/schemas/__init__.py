"""Pydantic Schemas — request/response shapes validated at the service boundary.

Invariants:
    - Schemas validate at system boundary (user input, model API responses)
    - Schemas never transform values beyond applying defaults

Design Decisions:
    - Schemas are evaluated through core/validation.py, which returns tagged
      results instead of letting ValidationError cross layers
"""
