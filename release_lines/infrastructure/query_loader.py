"""Input file parsing into repository queries."""
import logging
from typing import List
from release_lines.domain.models import RepositoryQuery
from release_lines.domain.versions import parse_version


logger = logging.getLogger(__name__)


def parse_queries(raw_text: str) -> List[RepositoryQuery]:
    """Parse ``owner/name,min_version`` records, one per line.
    
    Lines that do not match the format are skipped without notice, which
    also drops a ``repository,min_version`` header line.
    
    Args:
        raw_text: Full contents of the input file
        
    Returns:
        Queries in input order
    """
    queries: List[RepositoryQuery] = []
    
    for line in raw_text.splitlines():
        fields = line.split(",")
        if len(fields) != 2:
            continue
        
        repo_parts = fields[0].strip().split("/")
        if len(repo_parts) != 2 or not all(repo_parts):
            continue
        owner, name = repo_parts
        
        floor = parse_version(fields[1])
        if floor is None:
            continue
        
        queries.append(RepositoryQuery(owner=owner, name=name, floor=floor))
    
    logger.info(f"Parsed {len(queries)} repository queries")
    return queries


def load_queries(path: str) -> List[RepositoryQuery]:
    """Read and parse an input file.
    
    Raises:
        OSError: When the file cannot be opened or read
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        return parse_queries(f.read())
