"""Workspace-based Tk desktop front-end for browsing customer records fetched over HTTP."""

__version__ = "0.1.1"
__all__ = ["__version__"]