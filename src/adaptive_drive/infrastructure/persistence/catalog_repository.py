"""
In-memory catalog repository and JSON catalog loading.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ...domain.entities import Music
from ...domain.repositories import CatalogRepository
from ...shared.exceptions import CatalogLoadError, CatalogValidationError
from ..logging import log_function_call


logger = logging.getLogger(__name__)


DEFAULT_TRACKS: List[Dict[str, Any]] = [
    {'id': '1', 'title': 'Highway Pulse', 'artist': 'Neon Drive', 'type': 'energetic', 'tempo_bpm': 128, 'duration_seconds': 214},
    {'id': '2', 'title': 'Midnight Lanterns', 'artist': 'Slow Tide', 'type': 'calm', 'tempo_bpm': 72, 'duration_seconds': 251},
    {'id': '3', 'title': 'Overtake', 'artist': 'Redline Club', 'type': 'energetic', 'tempo_bpm': 150, 'duration_seconds': 198},
    {'id': '4', 'title': 'Fogbank', 'artist': 'Low Orbit', 'type': 'ambient', 'tempo_bpm': 60, 'duration_seconds': 312},
    {'id': '5', 'title': 'Lane Discipline', 'artist': 'Metronome Unit', 'type': 'focus', 'tempo_bpm': 110, 'duration_seconds': 240},
    {'id': '6', 'title': 'Coastal Morning', 'artist': 'Harbor Lights', 'type': 'calm', 'tempo_bpm': 84, 'duration_seconds': 226},
    {'id': '7', 'title': 'Telemetry', 'artist': 'Metronome Unit', 'type': 'focus', 'tempo_bpm': 118, 'duration_seconds': 263},
    {'id': '8', 'title': 'Afterglow Drift', 'artist': 'Low Orbit', 'type': 'ambient', 'tempo_bpm': 66, 'duration_seconds': 289},
    {'id': '9', 'title': 'Green Light Run', 'artist': 'Neon Drive', 'type': 'energetic', 'tempo_bpm': 142, 'duration_seconds': 205},
    {'id': '10', 'title': 'Rest Stop', 'artist': 'Slow Tide', 'type': 'calm', 'tempo_bpm': 76, 'duration_seconds': 233},
]


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held as an immutable snapshot of the tracks it was given."""

    def __init__(self, tracks: Iterable[Music] = ()):
        self._tracks = tuple(tracks)
        self._index: Dict[str, Music] = {}
        for track in self._tracks:
            if track.id in self._index:
                raise CatalogValidationError(
                    f"Duplicate track id in catalog: {track.id}",
                    track_id=track.id
                )
            self._index[track.id] = track
        logger.debug(f"Catalog initialized with {len(self._tracks)} tracks")

    def find_all(self) -> List[Music]:
        return list(self._tracks)

    def find_by_id(self, track_id: str) -> Optional[Music]:
        return self._index.get(track_id)

    def count(self) -> int:
        return len(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __repr__(self) -> str:
        return f"InMemoryCatalogRepository(tracks={len(self._tracks)})"


def default_catalog() -> InMemoryCatalogRepository:
    """Build the built-in demo catalog."""
    return InMemoryCatalogRepository(Music.from_dict(entry) for entry in DEFAULT_TRACKS)


@log_function_call
def load_catalog_file(path: Union[str, Path]) -> InMemoryCatalogRepository:
    """
    Load a catalog from a JSON file.

    The file holds either a list of track objects or an object with a
    ``tracks`` list. Each track needs ``id``, ``title``, ``artist`` and
    ``type``; ``tempo_bpm`` and ``duration_seconds`` are optional.

    Raises:
        CatalogLoadError: If the file cannot be read or is not valid JSON
        CatalogValidationError: If an entry is malformed or an id repeats
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError("Catalog file not found", details=str(path), source=str(path), original_exception=e)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Failed to read catalog file {path}", details=str(e), source=str(path), original_exception=e)

    if isinstance(data, dict):
        data = data.get('tracks')
    if not isinstance(data, list):
        raise CatalogLoadError(
            "Catalog file must contain a list of tracks or an object with a 'tracks' list",
            source=str(path)
        )

    tracks = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CatalogValidationError(f"Catalog entry #{position} is not an object", source=str(path))
        tracks.append(Music.from_dict(entry))

    logger.info(f"Loaded {len(tracks)} tracks from {path}")
    return InMemoryCatalogRepository(tracks)
