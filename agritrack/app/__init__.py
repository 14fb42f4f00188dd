"""Application composition layer for the Tkinter desktop shell.

The navigation controller lives here together with the bootstrap that wires
Tk-backed adapters, view models and the upstream login step.
"""
