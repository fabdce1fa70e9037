"""Shared job result message definition (serialization format)."""

from dataclasses import dataclass, field
from typing import List, Optional
import json

from common.types import JobStatus


@dataclass
class JobResult:
    """Outcome of one job, reported back to the job layer."""
    job_id: int
    status: JobStatus = JobStatus.INITIALIZED
    message: Optional[str] = None
    destination_paths: List[str] = field(default_factory=list)

    def mark_completed(self) -> None:
        """Mark the job as successfully completed."""
        self.status = JobStatus.COMPLETED

    def mark_failed(self, message: str) -> None:
        """Mark the job as failed with a diagnostic message."""
        self.status = JobStatus.ERROR
        self.message = message

    def attach_destination_paths(self, paths: List[str]) -> None:
        """Attach the paths produced by the job as its destination artifacts."""
        self.destination_paths.extend(paths)

    @property
    def is_completed(self) -> bool:
        return self.status == JobStatus.COMPLETED

    def to_json(self) -> bytes:
        """Serialize to JSON bytes."""
        return json.dumps({
            'job_id': self.job_id,
            'status': self.status.value,
            'message': self.message,
            'destination_paths': self.destination_paths
        }).encode('utf-8')

    @classmethod
    def from_json(cls, data: bytes) -> 'JobResult':
        """Deserialize from JSON bytes."""
        obj = json.loads(data)
        return cls(
            job_id=obj['job_id'],
            status=JobStatus(obj['status']),
            message=obj.get('message'),
            destination_paths=obj.get('destination_paths', [])
        )
