#!/usr/bin/env python3
"""Thin loader delegating CLI/TUI logic to the interface layer."""

import sys

from core.desktop.preferences.interface import prefs_app as _prefs_app

if __name__ != "__main__":
    # When imported, expose the full interface implementation directly.
    sys.modules[__name__] = _prefs_app
else:
    sys.exit(_prefs_app.main())
