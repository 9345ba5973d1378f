"""Poem Service Application Package.

Invariants:
    - Package root holds only identity constants (no import side-effects)
"""

SERVICE_NAME = "poem-service"
SERVICE_VERSION = "1.0.0"
