"""Domain normalization — pure functions, zero external dependencies.

Only stdlib imports allowed.
"""

import re

_VERSION_PREFIX = re.compile(r"^(?:version-|v)([0-9])")


def normalize_version(raw):
    """Normalize a version label: drop a leading 'version-' or 'v' in front of a digit."""
    return _VERSION_PREFIX.sub(r"\1", raw, count=1)
