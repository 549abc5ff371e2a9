"""Display formatting of selected versions."""
from typing import Sequence
from semver import Version


def format_result(owner: str, name: str, versions: Sequence[Version]) -> str:
    """Format one repository's result, e.g. ``latest versions of o/n: [2.0.0 1.1.1]``."""
    listed = " ".join(str(version) for version in versions)
    return f"latest versions of {owner}/{name}: [{listed}]"
