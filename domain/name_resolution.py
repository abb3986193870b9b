"""Domain name resolution — pure functions, zero external dependencies.

Only stdlib imports allowed.
"""

import re


def resolve_component_name(instance, name):
    """Resolve the canonical component name for a workload.

    A name that is the instance itself, or the instance followed by a
    ``-suffix``, is already canonical. Any other name is a sub-component and
    gets qualified by its instance: ``resolve_component_name("app", "db")``
    returns ``"app-db"``.
    """
    pattern = re.escape(instance) + r"(?:-.*)?"
    if re.fullmatch(pattern, name, flags=re.DOTALL):
        return name
    return f"{instance}-{name}"


def component_qualified_name(instance, component):
    """Return ``<instance>-<component>``, or None when the component is blank."""
    if not component.strip():
        return None
    return f"{instance}-{component}"
