"""Common literal values used across docforge.

These constants keep directory names, spreadsheet conventions, and client-side
storage keys centralized so generators, templates, and tests import the same
values without drifting. Intended for internal use within the docforge package.

Examples
--------
>>> from docforge import _constants
>>> _constants.ASSETS_DIRNAME
'assets'
>>> "ja" in _constants.TRUTHY_TOKENS
True
"""

ASSETS_DIRNAME = "assets"
IMAGES_DIRNAME = "images"
PACKAGES_DIRNAME = "packages"
INDEX_FILENAME = "index.html"

SOURCE_SUFFIX = ".xlsx"
LOCK_FILE_PREFIX = "~$"
DEFAULT_WIP_MARKER = "_wip"

THEME_STORAGE_KEY = "docforge.theme"

TRUTHY_TOKENS = frozenset({"1", "true", "yes", "y", "ja"})
