"""ViewModel package for screen content and persisted settings.

Call context:
    ``agritrack/app/main.py`` and the Tk views import these modules to turn
    descriptors, sessions and dispatch tables into plain view-facing data.

Dependencies:
    Domain types and the intent dispatcher only. Widgets, file I/O and
    navigation decisions stay outside.
"""
