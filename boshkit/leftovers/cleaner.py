"""
Cleaner for deleting confirmed leftover resources.

Provides deletion with dry-run mode, per-resource results and a summary.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from ..core.exceptions import CleanerError
from .base import Deletable

logger = logging.getLogger(__name__)


class DeleteStatus(Enum):
    """Status of a delete operation."""

    SUCCESS = "success"
    FAILED = "failed"
    DRY_RUN = "dry_run"


@dataclass
class DeleteResult:
    """
    Result of a single deletion attempt.

    Attributes:
        name: Resource name
        resource_type: Resource type tag
        status: Result status
        error_message: Error message if failed
        timestamp: When the operation was attempted
    """

    name: str
    resource_type: str
    status: DeleteStatus
    error_message: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.utcnow)


@dataclass
class DeleteSummary:
    """
    Summary of a batch delete operation.

    Attributes:
        total: Total number of resources processed
        deleted: Number successfully deleted
        failed: Number that failed to delete
        dry_run: Number processed in dry-run mode
        results: Individual results for each resource
        start_time: When the operation started
        end_time: When the operation completed
    """

    total: int = 0
    deleted: int = 0
    failed: int = 0
    dry_run: int = 0
    results: List[DeleteResult] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.utcnow)
    end_time: Optional[datetime] = None

    def add_result(self, result: DeleteResult) -> None:
        """Add a result and update counts."""
        self.results.append(result)
        self.total += 1

        if result.status == DeleteStatus.SUCCESS:
            self.deleted += 1
        elif result.status == DeleteStatus.FAILED:
            self.failed += 1
        elif result.status == DeleteStatus.DRY_RUN:
            self.dry_run += 1

    def complete(self) -> None:
        """Mark the operation as complete."""
        self.end_time = datetime.utcnow()


class LeftoversCleaner:
    """
    Cleaner for deleting resources returned by a lister.

    Provides:
    - Dry-run mode (preview without deleting)
    - Per-resource error capture, so one failure doesn't stop the batch
    - Progress callbacks
    """

    def delete(self, resource: Deletable, dry_run: bool = True) -> DeleteResult:
        """
        Delete a single resource.

        Args:
            resource: Resource to delete
            dry_run: If True, only simulate deletion

        Returns:
            DeleteResult with operation status
        """
        if dry_run:
            return DeleteResult(
                name=resource.name(),
                resource_type=resource.type(),
                status=DeleteStatus.DRY_RUN,
            )

        try:
            resource.delete()
            return DeleteResult(
                name=resource.name(),
                resource_type=resource.type(),
                status=DeleteStatus.SUCCESS,
            )
        except CleanerError as e:
            logger.warning(e.message)
            return DeleteResult(
                name=resource.name(),
                resource_type=resource.type(),
                status=DeleteStatus.FAILED,
                error_message=e.message,
            )

    def delete_batch(
        self,
        resources: List[Deletable],
        dry_run: bool = True,
        progress_callback: Optional[Callable[[DeleteResult], None]] = None,
    ) -> DeleteSummary:
        """
        Delete multiple resources.

        Args:
            resources: Resources to delete, in order
            dry_run: If True, only simulate deletion
            progress_callback: Optional callback called after each deletion

        Returns:
            DeleteSummary with results
        """
        summary = DeleteSummary()

        for resource in resources:
            result = self.delete(resource, dry_run=dry_run)
            summary.add_result(result)

            if progress_callback:
                progress_callback(result)

        summary.complete()
        return summary
