"""
Playlist generation DTOs for the application layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, List, Tuple
from uuid import uuid4

from ...domain.entities import DriveContext, Music, OperatingMode


MIXED_FILTER_LABEL = "MIXED"


@dataclass(frozen=True)
class PlaylistGenerationRequest:
    """Request to rank the catalog for one drive context."""
    context: DriveContext
    correlation_id: Optional[str] = None
    request_id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'request_id': self.request_id,
            'correlation_id': self.correlation_id,
            'context': self.context.to_dict()
        }


@dataclass
class PlaylistGenerationResponse:
    """Ranked playlist plus the decision state shown by the logic debugger."""
    request_id: str
    context: DriveContext
    mode: OperatingMode
    tracks: List[Music] = field(default_factory=list)
    priority_types: Tuple[str, ...] = ()
    processing_time_ms: Optional[float] = None
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def rule(self) -> str:
        """Name of the classifier rule that fired."""
        return self.mode.value

    @property
    def active_filter(self) -> str:
        """Type of the leading track, or MIXED when the playlist is empty."""
        if not self.tracks:
            return MIXED_FILTER_LABEL
        return self.tracks[0].type.upper()

    @property
    def is_empty(self) -> bool:
        return not self.tracks

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def priority_track_count(self) -> int:
        """Number of tracks whose type matches the mode's priority."""
        return sum(1 for track in self.tracks if track.type.lower() in self.priority_types)

    def get_summary(self) -> Dict[str, Any]:
        """Get generation summary."""
        return {
            'request_id': self.request_id,
            'rule': self.rule,
            'filter': self.active_filter,
            'track_count': self.track_count,
            'priority_track_count': self.priority_track_count,
            'processing_time_ms': self.processing_time_ms
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'request_id': self.request_id,
            'context': self.context.to_dict(),
            'mode': self.mode.value,
            'rule': self.rule,
            'active_filter': self.active_filter,
            'priority_types': list(self.priority_types),
            'tracks': [track.to_dict() for track in self.tracks],
            'processing_time_ms': self.processing_time_ms,
            'generated_at': self.generated_at.isoformat(),
            'summary': self.get_summary()
        }
