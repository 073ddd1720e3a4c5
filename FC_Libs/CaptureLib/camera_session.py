"""
Camera session state for Film Camera.

CameraSession owns the state the camera screen works with: the selected
film type, whether a capture is running and the outcome of the last one.
Commands are serialized on a single-thread command queue; presentation code
subscribes to SessionEvent notifications instead of polling.

Classes:
    SessionEvent: Notification about a state change
    SessionState: Snapshot of the session state
    CameraSession: The session itself
"""

import concurrent.futures
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional

from FC_Libs.errors import CaptureError, CaptureErrorKind
from FC_Libs.FilterLib.film_types import FilmType
from FC_Libs.CaptureLib.capture_pipeline import CapturePipeline
from FC_Libs.PairStoreLib.image_models import ImagePair

logger = logging.getLogger(__name__)

EVENT_FILM_TYPE_CHANGED = "film_type_changed"
EVENT_CAPTURE_STARTED = "capture_started"
EVENT_CAPTURE_SUCCEEDED = "capture_succeeded"
EVENT_CAPTURE_FAILED = "capture_failed"


@dataclass(frozen=True)
class SessionEvent:
    kind: str
    film_type: FilmType
    pair: Optional[ImagePair] = None
    error: Optional[Exception] = None


@dataclass(frozen=True)
class SessionState:
    film_type: FilmType = FilmType.MONOCHROME
    busy: bool = False
    last_pair: Optional[ImagePair] = None
    last_error: Optional[Exception] = None
    captures: int = 0


Listener = Callable[[SessionEvent], None]


class CameraSession:
    """
    Serialized command surface over a capture pipeline.

    ``capture()`` runs on the caller's thread and is rejected with a
    CaptureError of kind "busy" while another capture runs.
    ``submit_capture()`` queues the capture on the session's command thread
    and returns a Future, so queued captures run one after another.

    Example:
        >>> with CameraSession(pipeline) as session:
        ...     session.select_film_type(FilmType.WARM_TONE)
        ...     pair = session.submit_capture().result()
    """

    def __init__(self, pipeline: CapturePipeline, film_type: Any = FilmType.MONOCHROME) -> None:
        self.pipeline = pipeline
        self._state = SessionState(film_type=FilmType.parse(film_type))
        self._state_lock = threading.Lock()
        self._listeners: List[Listener] = []
        self._commands = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="film-camera-session"
        )

    @property
    def state(self) -> SessionState:
        with self._state_lock:
            return self._state

    @property
    def film_type(self) -> FilmType:
        return self.state.film_type

    @property
    def busy(self) -> bool:
        return self.pipeline.busy

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Session listener failed on {event.kind}")

    def _update(self, **changes: Any) -> SessionState:
        with self._state_lock:
            self._state = replace(self._state, **changes)
            return self._state

    def select_film_type(self, film_type: Any) -> FilmType:
        """
        Select the film type used by subsequent captures.

        Pairs captured earlier keep the film type they were filtered with.

        Raises:
            ValueError: If film_type does not name a film type
        """
        selected = FilmType.parse(film_type)
        if selected != self.film_type:
            self._update(film_type=selected)
            logger.debug(f"Film type changed to {selected.value}")
            self._emit(SessionEvent(EVENT_FILM_TYPE_CHANGED, selected))
        return selected

    def capture(self) -> ImagePair:
        return self._run_capture(self.film_type)

    def submit_capture(self) -> "concurrent.futures.Future[ImagePair]":
        return self._commands.submit(self._run_capture, self.film_type)

    def _run_capture(self, film_type: FilmType) -> ImagePair:
        if self.pipeline.busy:
            raise CaptureError.busy()

        self._update(busy=True)
        self._emit(SessionEvent(EVENT_CAPTURE_STARTED, film_type))
        try:
            pair = self.pipeline.capture(film_type)
        except CaptureError as e:
            if e.kind != CaptureErrorKind.BUSY:
                self._fail(film_type, e)
            raise
        except Exception as e:
            self._fail(film_type, e)
            raise
        finally:
            self._update(busy=self.pipeline.busy)

        with self._state_lock:
            self._state = replace(
                self._state,
                last_pair=pair,
                last_error=None,
                captures=self._state.captures + 1,
            )
        self._emit(SessionEvent(EVENT_CAPTURE_SUCCEEDED, film_type, pair=pair))
        return pair

    def _fail(self, film_type: FilmType, error: Exception) -> None:
        logger.warning(f"Capture abandoned: {error}")
        self._update(last_error=error)
        self._emit(SessionEvent(EVENT_CAPTURE_FAILED, film_type, error=error))

    def close(self) -> None:
        self._commands.shutdown(wait=True)
        self.pipeline.close()

    def __enter__(self) -> "CameraSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
