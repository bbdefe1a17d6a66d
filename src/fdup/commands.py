"""
Unified command orchestrator for duplicate search.
This is the SINGLE code path from parameters to results: used by the CLI and library callers.
"""
from typing import Iterator, List

from fdup.core.models import DeduplicationParams
from fdup.core.deduplicator import duplicate_files


class DeduplicationCommand:
    """
    Orchestrates the duplicate search workflow:
    1. Walk the root directory
    2. Group candidates by size, then by content hash
    3. Return the lazy stream of duplicate groups

    Usage:
        params = DeduplicationParams(root_dir="/home/me/Downloads", sort_groups=True)
        for group in DeduplicationCommand().execute(params):
            print(group)
    """

    def execute(self, params: DeduplicationParams) -> Iterator[List[str]]:
        """
        Execute the search with given parameters.

        Args:
            params: Validated search parameters

        Returns:
            Lazy, single-pass iterator of duplicate groups

        Raises:
            RuntimeError: If the root directory does not exist (raised on first iteration)
        """
        return duplicate_files(
            params.root_dir,
            sort_groups=params.sort_groups,
            max_workers=params.max_workers
        )
