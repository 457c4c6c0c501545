"""
envconf - integration tests package.

File: tests/integration/__init__.py
Last updated: 2026-10-17

Purpose
- Test package marker file.

What should be included in this file
- Keep this file lightweight; it only marks the integration test package boundary.

Functional requirements
- Must not read or modify the process environment at import time.

Non-functional requirements
- Deterministic and side-effect free.
"""
