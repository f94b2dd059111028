"""
This module defines static application-level constants describing where the
Keystone package lives on disk.
"""

from pathlib import Path

CWD = Path(__file__).parent
"""The directory containing this settings file."""

PACKAGE_DIR = CWD.parent.parent
"""The directory of the `keystone` import package."""
