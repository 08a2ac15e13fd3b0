"""Top-level package for rmenu.

A freedesktop Desktop Entry format engine with the launcher plumbing
built on top of it (command catalog, settings store, CLI).

License: GPL-3.0
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rmenu")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
