"""Keying session: acquire a key selection, run a pass, repeat."""

import logging
from pathlib import Path
from typing import List, Optional

from chromakey.core import KeySelection, RunState, SyncResult
from chromakey.interactive import KeyPicker, NullPreview, Preview, WindowPreview
from chromakey.media_factory import create_sink, create_source, sink_type_for
from chromakey.pipeline.synchronizer import FrameSynchronizer, check_pairing
from chromakey.utils.config import ChromaKeyConfig

logger = logging.getLogger(__name__)


class KeyingSession:
    """Drives the run state machine for one foreground/background pair.

    ``UNINITIALIZED -> READY -> RUNNING -> DONE``, and from ``DONE`` back
    to ``UNINITIALIZED`` for another pass with a freshly picked color.

    Args:
        foreground_path: Media to key (image, video or ``webcam:<n>``).
        background_path: Replacement background (image or video).
        output_path: Where to write the result; ``None`` previews only.
        config: Settings; defaults are used when omitted.
        preview: Live display; built from ``config.preview`` when omitted.
    """

    def __init__(
        self,
        foreground_path: str | Path,
        background_path: str | Path,
        output_path: Optional[str | Path] = None,
        config: Optional[ChromaKeyConfig] = None,
        preview: Optional[Preview] = None,
    ):
        self.foreground_path = str(foreground_path)
        self.background_path = str(background_path)
        self.output_path = str(output_path) if output_path else None
        self.config = config or ChromaKeyConfig()

        if preview is None:
            if self.config.preview.enabled:
                preview = WindowPreview(
                    self.config.preview.window_name, self.config.preview.cancel_key
                )
            else:
                preview = NullPreview()
        self.preview = preview

        self._state = RunState.UNINITIALIZED
        self._selection: Optional[KeySelection] = None

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def selection(self) -> Optional[KeySelection]:
        return self._selection

    def _require(self, expected: RunState, action: str) -> None:
        if self._state != expected:
            raise RuntimeError(
                f"Cannot {action} in state {self._state.name}, "
                f"expected {expected.name}"
            )

    def acquire(self, picker: KeyPicker) -> bool:
        """Capture a key selection from the foreground.

        Returns:
            ``True`` when a selection was made (state becomes READY),
            ``False`` when the picker declined (state stays UNINITIALIZED).
        """
        self._require(RunState.UNINITIALIZED, "acquire a key color")
        selection = picker.pick(create_source(self.foreground_path, loop=True))
        if selection is None:
            logger.info("No key color picked for %s", self.foreground_path)
            return False

        self._selection = selection
        self._state = RunState.READY
        return True

    def run(self) -> SyncResult:
        """Run one keying pass with the captured selection.

        The source/sink pairing is checked before the sink is created, so
        an invalid combination leaves an existing output file untouched.
        The session ends up DONE even when the pass fails, and the preview
        is closed after every pass.
        """
        self._require(RunState.READY, "run")
        self._state = RunState.RUNNING
        try:
            foreground = create_source(self.foreground_path, loop=False)
            background = create_source(self.background_path, loop=True)
            check_pairing(foreground, background, sink_type_for(self.output_path))
            with create_sink(
                self.output_path,
                self._selection.frame_size,
                fourcc=self.config.output.fourcc,
                fps=self.config.output.fps,
            ) as sink:
                synchronizer = FrameSynchronizer(
                    foreground, background, sink,
                    preview=self.preview,
                    frame_delay_ms=self.config.preview.frame_delay_ms,
                )
                return synchronizer.run(self._selection)
        finally:
            self._state = RunState.DONE
            self.preview.close()

    def reset(self) -> None:
        """Forget the selection so a new color can be picked."""
        self._require(RunState.DONE, "reset")
        self._selection = None
        self._state = RunState.UNINITIALIZED

    def run_interactive(self, picker: KeyPicker) -> List[SyncResult]:
        """Repeat acquire/run/reset until the picker returns ``None``."""
        results = []
        while self.acquire(picker):
            results.append(self.run())
            self.reset()
        return results
