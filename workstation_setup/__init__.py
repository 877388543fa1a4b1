"""Workstation setup (Python-first, step-driven).

Core design goals:
- Idempotent steps (probe before install)
- Stop on the first failure, no rollback
- Explicit environment context instead of process-wide mutation
- Centralized logging
"""

__all__ = []
