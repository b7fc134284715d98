"""Kiosk provisioner for Fedora (Python-first, step-driven).

Core design goals:
- Idempotent steps: every run re-converges the host
- Each step reports [OK] or [SKIP]
- Best-effort only where a failure cannot matter
- Centralized logging
"""

__all__ = []
