"""Semantic version parsing and latest-per-line selection."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from semver import Version


logger = logging.getLogger(__name__)


def parse_version(text: str) -> Optional[Version]:
    """Parse a version string, tolerating one leading marker such as ``v``.
    
    Args:
        text: Raw version text, e.g. ``v1.2.3`` or ``1.2.3-rc.1``
        
    Returns:
        The parsed version, or None when the text is not a semantic version
    """
    text = text.strip()
    if text and not text[0].isdigit():
        text = text[1:]
    try:
        return Version.parse(text)
    except (ValueError, TypeError):
        return None


def parse_versions(tags: Iterable[str]) -> Tuple[List[Version], int]:
    """Parse release tags, dropping the ones that are not semantic versions.
    
    Returns:
        Tuple of parsed versions (in input order) and the number of skipped tags
    """
    versions: List[Version] = []
    skipped = 0
    for tag in tags:
        version = parse_version(tag)
        if version is None:
            logger.debug(f"Skipping tag {tag!r}: not a semantic version")
            skipped += 1
            continue
        versions.append(version)
    return versions, skipped


def select_latest_per_line(versions: Iterable[Version], floor: Version) -> List[Version]:
    """Select the highest version of every major.minor line at or above floor.
    
    Args:
        versions: Candidate versions in any order, duplicates allowed
        floor: Inclusive lower bound; lower versions are ignored entirely
        
    Returns:
        One version per line, newest line first
    """
    latest: Dict[Tuple[int, int], Version] = {}
    for version in sorted(versions):
        if version < floor:
            continue
        # Ascending order: the last version seen in a line is its highest
        latest[(version.major, version.minor)] = version
    
    return [latest[line] for line in sorted(latest, reverse=True)]
