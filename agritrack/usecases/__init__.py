"""Use-case layer for intent resolution and confirmation.

Modules here operate on domain objects and ports only; no Tk widgets are
imported, so the navigation rules can be exercised headless.
"""
