"""Plato installer (reMarkable, systemd).

Core design goals:
- Fail fast, before any mutation, when unpacked in the wrong place
- Idempotent steps, safe to rerun
- Unit file always overwritten with the bundled copy
- Registration only; starting the service is left to the operator
"""

__all__ = []
