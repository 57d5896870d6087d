# session_controller.py
import logging
import threading
from typing import Callable, List, Optional, Protocol

from ...errors import AnalysisError, ImageReadError, InvalidImageTypeError
from ...models.nutrition import NutritionAnalysis
from ...models.session import ImageUpload, PendingState, SessionSnapshot
from ..image_encoder import ImageEncoder

logger = logging.getLogger(__name__)

INVALID_TYPE_MESSAGE = "Please select an image file"
READ_ERROR_MESSAGE = "Could not read the selected file. Please try another image."
NO_FILE_MESSAGE = "Please select an image first"
ANALYSIS_FAILED_MESSAGE = "Failed to analyze image. Please try again."

Listener = Callable[[SessionSnapshot], None]


class AnalysisClient(Protocol):
    def analyze(self, upload: ImageUpload) -> NutritionAnalysis: ...


class SessionController:
    """
    Owns one upload session and the allowed transitions between
    idle, loading, succeeded and failed.

    Every file selection starts a new generation. An analysis that completes
    for an older generation is dropped, so a slow reply never overwrites the
    state of a newer selection.
    """

    def __init__(self, client: AnalysisClient, encoder: Optional[ImageEncoder] = None):
        self.client = client
        self.encoder = encoder or ImageEncoder()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

        self.selected_image: Optional[ImageUpload] = None
        self.preview_encoding: Optional[str] = None
        self.pending_state = PendingState.IDLE
        self.result: Optional[NutritionAnalysis] = None
        self.error_message: Optional[str] = None
        self.generation = 0

    # -------- observation --------

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                pending_state=self.pending_state,
                filename=self.selected_image.filename if self.selected_image else None,
                preview_encoding=self.preview_encoding,
                result=self.result,
                error_message=self.error_message,
            )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state changes; returns an unsubscribe function"""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        snap = self.snapshot()
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snap)

    # -------- transitions --------

    def select_file(self, upload: ImageUpload) -> SessionSnapshot:
        with self._lock:
            self.generation += 1
            self.result = None
            self.error_message = None
            self.pending_state = PendingState.IDLE

            try:
                self.encoder.validate(upload)
            except InvalidImageTypeError as e:
                logger.info(f"Rejected {upload.filename!r}: {e}")
                self.error_message = INVALID_TYPE_MESSAGE
            else:
                try:
                    preview = self.encoder.to_preview(upload)
                except ImageReadError:
                    self.selected_image = None
                    self.preview_encoding = None
                    self.error_message = READ_ERROR_MESSAGE
                else:
                    self.selected_image = upload
                    self.preview_encoding = preview
        self._notify()
        return self.snapshot()

    def reject_selection(self, message: str) -> SessionSnapshot:
        """Record a selection that never reached the encoder, e.g. an oversized upload"""
        with self._lock:
            self.generation += 1
            self.result = None
            self.pending_state = PendingState.IDLE
            self.error_message = message
        self._notify()
        return self.snapshot()

    def release(self):
        """Drop the selected image and its preview; used when the session is evicted"""
        with self._lock:
            self.generation += 1
            if self.selected_image is not None:
                self.selected_image.stream.close()
            self.selected_image = None
            self.preview_encoding = None
            self.result = None
            self.error_message = None
            self.pending_state = PendingState.IDLE

    def start_analysis(self, background: bool = True) -> Optional[threading.Thread]:
        """
        Move to loading and analyze the selected image.

        With background=True the call returns the worker thread at once;
        otherwise the analysis completes before returning. Returns None when
        nothing was started.
        """
        with self._lock:
            if self.pending_state is PendingState.LOADING:
                return None
            if self.selected_image is None:
                self.error_message = NO_FILE_MESSAGE
                started = False
            else:
                self.pending_state = PendingState.LOADING
                self.error_message = None
                self.result = None
                upload = self.selected_image
                generation = self.generation
                started = True
        self._notify()
        if not started:
            return None

        if not background:
            self._run_analysis(upload, generation)
            return None

        worker = threading.Thread(
            target=self._run_analysis,
            args=(upload, generation),
            name=f"analysis-{generation}",
            daemon=True,
        )
        worker.start()
        return worker

    def _run_analysis(self, upload: ImageUpload, generation: int):
        try:
            analysis = self.client.analyze(upload)
        except AnalysisError as e:
            logger.error(f"Analysis failed for {upload.filename!r}: {e} (cause: {e.__cause__!r})")
            self._complete(generation, error_message=ANALYSIS_FAILED_MESSAGE)
        except Exception:
            logger.exception(f"Unexpected error analyzing {upload.filename!r}")
            self._complete(generation, error_message=ANALYSIS_FAILED_MESSAGE)
        else:
            self._complete(generation, result=analysis)

    def _complete(self, generation: int,
                  result: Optional[NutritionAnalysis] = None,
                  error_message: Optional[str] = None):
        with self._lock:
            if generation != self.generation:
                logger.info(f"Discarding stale analysis (generation {generation}, current {self.generation})")
                return
            if result is not None:
                self.result = result
                self.error_message = None
                self.pending_state = PendingState.SUCCEEDED
            else:
                self.result = None
                self.error_message = error_message
                self.pending_state = PendingState.FAILED
        self._notify()
