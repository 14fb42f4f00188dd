"""Adapter package for concrete port implementations.

Purpose:
    Collect the Tk-backed presentation adapters, local settings storage and
    the in-memory demo authenticator used by the desktop bootstrap.

Call context:
    Imported by ``agritrack.app.main`` for runtime wiring and by tests for the
    storage and authentication behaviour.
"""
