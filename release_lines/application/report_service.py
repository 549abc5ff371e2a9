"""Report service orchestrating the release lookup for each repository."""
import logging
import sys
import time
from typing import Iterable, Optional, TextIO
from release_lines.application.reporter import format_result
from release_lines.domain.models import RepositoryQuery, RepositoryReport, RunMetrics
from release_lines.domain.release_source import IReleaseSource, ReleaseFetchError
from release_lines.domain.versions import parse_versions, select_latest_per_line


logger = logging.getLogger(__name__)


class ReleaseReportService:
    """Application service reporting the latest release of each version line.
    
    Coordinates the release source, the version selection and the output.
    Repositories are processed one at a time, in input order.
    """
    
    def __init__(self, release_source: IReleaseSource, output: Optional[TextIO] = None):
        """Initialize report service.
        
        Args:
            release_source: Release source implementation
            output: Stream receiving report lines (defaults to stdout)
        """
        self._release_source = release_source
        self._output = output if output is not None else sys.stdout
    
    async def report(self, query: RepositoryQuery) -> RepositoryReport:
        """Build the report of a single repository.
        
        Raises:
            ReleaseFetchError: When the repository's releases cannot be fetched
        """
        tags = await self._release_source.fetch_release_tags(query.owner, query.name)
        versions, skipped = parse_versions(tags)
        if skipped:
            logger.info(f"Skipped {skipped} non-semver tags of {query.full_name}")
        
        return RepositoryReport(
            query=query,
            versions=select_latest_per_line(versions, query.floor),
            tags_skipped=skipped
        )
    
    async def run(self, queries: Iterable[RepositoryQuery]) -> RunMetrics:
        """Report every query, writing one line per repository.
        
        A repository whose releases cannot be fetched is logged and skipped;
        the remaining repositories are still processed.
        
        Returns:
            RunMetrics with operation statistics
        """
        start_time = time.time()
        processed = 0
        failed = 0
        tags_skipped = 0
        
        for query in queries:
            try:
                report = await self.report(query)
            except ReleaseFetchError as e:
                logger.error(f"Error retrieving releases of {query.full_name}: {e.reason}")
                failed += 1
                continue
            
            self._output.write(
                format_result(query.owner, query.name, report.versions) + "\n"
            )
            processed += 1
            tags_skipped += report.tags_skipped
        
        self._output.flush()
        duration = time.time() - start_time
        
        logger.info(
            f"Reported {processed} repositories in {duration:.2f} seconds "
            f"({failed} failed, {tags_skipped} tags skipped)"
        )
        
        return RunMetrics(
            repositories_processed=processed,
            repositories_failed=failed,
            tags_skipped=tags_skipped,
            duration_seconds=duration
        )
    
    async def close(self) -> None:
        """Close connections."""
        await self._release_source.close()
