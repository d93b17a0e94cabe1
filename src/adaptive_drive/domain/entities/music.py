"""
Music entity representing one catalog track.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from ...shared.exceptions import CatalogValidationError


@dataclass(frozen=True)
class Music:
    """
    A track in the catalog.

    ``type`` is the mood/energy tag the operating modes rank on
    (energetic, calm, ambient, focus, ...). ``tempo_bpm`` feeds the weather
    tie-break; ``duration_seconds`` is display only.
    """

    id: str
    title: str
    artist: str
    type: str
    tempo_bpm: Optional[float] = None
    duration_seconds: Optional[float] = None

    @property
    def duration_label(self) -> str:
        """Get duration as M:SS, or an empty string when unknown."""
        if self.duration_seconds is None:
            return ""
        total = int(self.duration_seconds)
        return f"{total // 60}:{total % 60:02d}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'id': self.id,
            'title': self.title,
            'artist': self.artist,
            'type': self.type,
            'tempo_bpm': self.tempo_bpm,
            'duration_seconds': self.duration_seconds
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Music':
        """Create Music from dictionary."""
        missing = [key for key in ('id', 'title', 'artist', 'type') if data.get(key) in (None, '')]
        if missing:
            raise CatalogValidationError(
                f"Track is missing required fields: {', '.join(missing)}",
                track_id=data.get('id')
            )
        tempo = data.get('tempo_bpm', data.get('tempo'))
        duration = data.get('duration_seconds', data.get('duration'))
        try:
            return cls(
                id=str(data['id']),
                title=str(data['title']),
                artist=str(data['artist']),
                type=str(data['type']).lower(),
                tempo_bpm=float(tempo) if tempo is not None else None,
                duration_seconds=float(duration) if duration is not None else None
            )
        except (TypeError, ValueError) as e:
            raise CatalogValidationError(
                "Track has a non-numeric tempo or duration",
                track_id=data.get('id'),
                original_exception=e
            )

    def __str__(self) -> str:
        return f"{self.artist} - {self.title} [{self.type}]"
