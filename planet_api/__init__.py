"""
Top-level package for the planet API.

This file makes ``planet_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``planet_api.app.main``.  The static landing page and the API
description document ship in ``static/`` next to it.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
