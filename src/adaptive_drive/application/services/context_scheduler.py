"""
Debounced re-evaluation of the playlist as the drive context changes.
"""

import logging
import threading
from typing import Callable, Optional

from ...domain.entities import DriveContext
from ...infrastructure.logging import get_correlation_id
from ...shared.exceptions import SchedulerError
from ..dtos.playlist_generation import (
    PlaylistGenerationRequest,
    PlaylistGenerationResponse
)
from .playlist_generation_service import PlaylistGenerationService


PlaylistCallback = Callable[[PlaylistGenerationResponse], None]


class ContextScheduler:
    """
    Evaluates only the most recent context once input has settled.

    Every ``submit`` supersedes whatever is pending and restarts the settling
    timer. When the timer fires the pending context is evaluated on the timer
    thread and the response is handed to ``on_playlist``. A result computed
    for a context that was superseded meanwhile is dropped, so callers only
    ever see the last context's playlist.

    Deliveries are serialised: the generation check and the ``on_playlist``
    call happen under one delivery lock, so an older result can never reach
    the callback after a newer one. An evaluation that raises on the timer
    thread is logged and kept in ``last_error``; waiters are released.
    """

    def __init__(
        self,
        service: PlaylistGenerationService,
        on_playlist: PlaylistCallback,
        settle_seconds: float = 0.4
    ):
        self.logger = logging.getLogger(__name__)
        self.service = service
        self.on_playlist = on_playlist
        self.settle_seconds = settle_seconds

        self._lock = threading.Condition()
        # Reentrant so on_playlist may call flush()
        self._delivery_lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[DriveContext] = None
        self._pending_correlation_id: Optional[str] = None
        self._generation = 0
        self._completed_generation = 0
        self._closed = False
        self.latest_response: Optional[PlaylistGenerationResponse] = None
        self.last_error: Optional[Exception] = None

    @property
    def is_processing(self) -> bool:
        """True while a submitted context is waiting to be evaluated."""
        with self._lock:
            return self._pending is not None

    @property
    def status_label(self) -> str:
        return "Analyzing Context..." if self.is_processing else "System Active"

    def submit(self, context: DriveContext) -> int:
        """
        Schedule evaluation of a context, superseding any pending one.

        The submitting thread's correlation id travels with the context, so
        logs written on the timer thread carry it too.

        Returns:
            Generation number identifying this submission

        Raises:
            SchedulerError: If the scheduler has been shut down
        """
        with self._lock:
            if self._closed:
                raise SchedulerError("Cannot submit context: scheduler is shut down")

            self._generation += 1
            generation = self._generation
            if self._timer is not None:
                self._timer.cancel()
                self.logger.debug(f"Superseded pending context with generation {generation}")

            self._pending = context
            self._pending_correlation_id = get_correlation_id()
            self._timer = threading.Timer(self.settle_seconds, self._fire, args=(generation,))
            self._timer.daemon = True
            self._timer.start()

        return generation

    def flush(self) -> Optional[PlaylistGenerationResponse]:
        """
        Evaluate the pending context now instead of waiting for the timer.

        Errors raised by the evaluation propagate to the caller.
        """
        with self._lock:
            if self._pending is None:
                return None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            generation = self._generation
            request = self._take_pending()

        return self._evaluate(generation, request)

    def cancel(self) -> bool:
        """Drop the pending context; results still in flight are discarded."""
        with self._lock:
            had_pending = self._pending is not None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._pending = None
            self._pending_correlation_id = None
            self._generation += 1
        return had_pending

    def shutdown(self) -> None:
        """Cancel pending work and refuse further submissions."""
        self.cancel()
        with self._lock:
            self._closed = True
        self.logger.debug("Context scheduler shut down")

    def _take_pending(self) -> PlaylistGenerationRequest:
        # Caller holds self._lock
        request = PlaylistGenerationRequest(
            context=self._pending,
            correlation_id=self._pending_correlation_id
        )
        self._pending = None
        self._pending_correlation_id = None
        return request

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            request = self._take_pending()
            self._timer = None

        try:
            self._evaluate(generation, request)
        except Exception as e:
            self.logger.error(
                f"Playlist evaluation failed for generation {generation}: {e}",
                extra={
                    'generation': generation,
                    'request_id': request.request_id,
                    'context': request.context.to_dict()
                },
                exc_info=True
            )
            with self._lock:
                self.last_error = e
                self._mark_completed(generation)

    def _evaluate(self, generation: int, request: PlaylistGenerationRequest) -> Optional[PlaylistGenerationResponse]:
        response = self.service.generate_playlist(request)

        with self._delivery_lock:
            with self._lock:
                if generation != self._generation:
                    self.logger.debug(f"Discarding stale playlist for generation {generation}")
                    return None
                self.latest_response = response
                self.last_error = None

            self.on_playlist(response)

        with self._lock:
            self._mark_completed(generation)
        return response

    def _mark_completed(self, generation: int) -> None:
        # Caller holds self._lock
        self._completed_generation = max(self._completed_generation, generation)
        self._lock.notify_all()

    def wait_for(self, generation: int, timeout: Optional[float] = None) -> bool:
        """
        Block until this generation, or a later one, was delivered or failed.

        Check ``last_error`` afterwards to tell the two apart.

        Returns:
            False if the timeout expired first
        """
        with self._lock:
            return self._lock.wait_for(lambda: self._completed_generation >= generation, timeout)

    def __enter__(self) -> 'ContextScheduler':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
