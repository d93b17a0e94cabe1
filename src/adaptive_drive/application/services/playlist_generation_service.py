"""
PlaylistGenerationService - ranks the catalog for the current drive context.
"""

import logging
import time
from typing import List, Optional, Sequence, Tuple

from ...domain.entities import DriveContext, Music, OperatingMode
from ...domain.repositories import CatalogRepository
from ...infrastructure.logging import log_function_call, set_correlation_id
from ...shared.config.settings import PlaylistConfig
from ..dtos.playlist_generation import (
    PlaylistGenerationRequest,
    PlaylistGenerationResponse
)
from .mode_classifier import ModeClassifier


class PlaylistGenerationService:
    """
    Re-ranks the catalog for a drive context.

    The context is classified into an operating mode, the mode selects a set
    of priority track types, and the catalog is stably partitioned so that
    priority tracks come first. Inside each group the weather policy may
    demote tracks, but no track ever changes group. Nothing is filtered out:
    the full catalog comes back, reordered.

    Generation is deterministic for a fixed catalog and context, never
    mutates its inputs and never raises; an empty catalog yields an empty
    playlist.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        config: Optional[PlaylistConfig] = None,
        classifier: Optional[ModeClassifier] = None
    ):
        self.logger = logging.getLogger(__name__)
        self.catalog = catalog
        self.config = config or PlaylistConfig()
        self.classifier = classifier or ModeClassifier()

    def priority_types(self, mode: OperatingMode) -> Tuple[str, ...]:
        """Get the track types ranked first for a mode; empty means mixed."""
        if mode is OperatingMode.HIGH_SPEED_FOCUS:
            types = self.config.high_speed_types
        elif mode is OperatingMode.NIGHT_MODE_RELAX:
            types = self.config.night_types
        elif mode is OperatingMode.STANDARD_ADAPTIVE:
            types = self.config.standard_types
        else:
            raise AssertionError(f"Unhandled operating mode: {mode!r}")
        return tuple(t.lower() for t in types)

    def generate(self, context: DriveContext) -> List[Music]:
        """Return the catalog ranked for the context."""
        mode = self.classifier.classify(context)
        return self.rank(self.catalog.find_all(), context, mode)

    @log_function_call
    def generate_playlist(self, request: PlaylistGenerationRequest) -> PlaylistGenerationResponse:
        """
        Generate a playlist for the request's context.

        Args:
            request: PlaylistGenerationRequest carrying the drive context

        Returns:
            PlaylistGenerationResponse with the ranked tracks and decision state
        """
        # Tag this thread's logs with the caller's correlation ID
        if request.correlation_id:
            set_correlation_id(request.correlation_id)

        start_time = time.perf_counter()

        context = request.context
        mode = self.classifier.classify(context)
        tracks = self.rank(self.catalog.find_all(), context, mode)

        processing_time = (time.perf_counter() - start_time) * 1000
        response = PlaylistGenerationResponse(
            request_id=request.request_id,
            context=context,
            mode=mode,
            tracks=tracks,
            priority_types=self.priority_types(mode),
            processing_time_ms=processing_time
        )

        self.logger.info(
            f"Playlist generated: rule={response.rule} filter={response.active_filter} "
            f"tracks={response.track_count}",
            extra={
                'request_id': request.request_id,
                'operating_mode': mode.value,
                'weather': context.weather,
                'track_count': response.track_count,
                'duration_ms': processing_time
            }
        )
        return response

    def rank(self, tracks: Sequence[Music], context: DriveContext, mode: OperatingMode) -> List[Music]:
        """Stable partition by priority type, then weather order within each group."""
        priority = self.priority_types(mode)

        matching: List[Music] = []
        others: List[Music] = []
        for track in tracks:
            if track.type.lower() in priority:
                matching.append(track)
            else:
                others.append(track)

        self.logger.debug(
            f"{mode.value}: {len(matching)} priority tracks ({', '.join(priority) or 'mixed'}), "
            f"{len(others)} others"
        )

        return self._order_for_weather(matching, context.weather) + self._order_for_weather(others, context.weather)

    def _order_for_weather(self, group: List[Music], weather: str) -> List[Music]:
        policy = self.config.weather_policy
        # sorted() is stable, so equal penalties keep catalog order
        return sorted(
            group,
            key=lambda track: policy.penalty_for(weather, track.type.lower(), track.tempo_bpm)
        )
