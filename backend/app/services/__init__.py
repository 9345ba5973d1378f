"""Services Layer — orchestrates infrastructure calls around the pure core.

Invariants:
    - Services never touch the request/response objects (routes do)
"""
