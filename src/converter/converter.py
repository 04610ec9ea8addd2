"""RecipeConverter: wires the five converter components into one surface.

This is what a UI (or the CLI in query.py) talks to. It routes submit() to
the active modality and refuses to re-submit a modality whose request is
still pending, the same way a form disables its submit button.
"""

from typing import Optional

from src.converter.capabilities import Clipboard, FilePicker, LoggingNotifier, Notifier
from src.converter.client import RecipeServiceClient
from src.converter.dispatcher import RequestDispatcher, StateListener
from src.converter.image_pipeline import ImagePipeline
from src.converter.input_mode import InputModeController
from src.converter.presenter import ResultPresenter
from src.converter.servings import ServingsResolver
from src.models.models import InputMode, RequestState
from src.utils.logger import logger


class RecipeConverter:
    """Recipe generation request orchestrator.

    Attributes:
        controller: Active modality and shared form fields.
        servings: Committed servings value (presets or applied custom value).
        images: Upload pipeline and preview for photo mode.
        presenter: Latest result and copy acknowledgement.
        dispatcher: The three request slots.
    """

    def __init__(
        self,
        client: Optional[RecipeServiceClient] = None,
        notifier: Optional[Notifier] = None,
        file_picker: Optional[FilePicker] = None,
        clipboard: Optional[Clipboard] = None,
        on_change: Optional[StateListener] = None,
        discard_stale: Optional[bool] = None,
    ) -> None:
        self.notifier = notifier or LoggingNotifier()
        self.controller = InputModeController()
        self.servings = ServingsResolver(self.notifier)
        self.images = ImagePipeline(self.notifier, file_picker=file_picker)
        self.presenter = ResultPresenter(self.notifier, clipboard=clipboard)
        self.dispatcher = RequestDispatcher(
            client=client or RecipeServiceClient(),
            controller=self.controller,
            servings=self.servings,
            images=self.images,
            presenter=self.presenter,
            notifier=self.notifier,
            on_change=on_change,
            discard_stale=discard_stale,
        )

    @property
    def mode(self) -> InputMode:
        return self.controller.mode

    def state(self, mode: Optional[InputMode] = None) -> RequestState:
        return self.dispatcher.state(mode or self.controller.mode)

    def can_submit(self, mode: Optional[InputMode] = None) -> bool:
        """Whether the submit action for a modality should be enabled."""
        mode = mode or self.controller.mode
        if self.dispatcher.is_pending(mode):
            return False
        if mode is InputMode.PHOTO:
            return self.images.has_preview
        return bool(self.controller.text.strip())

    async def submit(self) -> RequestState:
        """Submit the active modality.

        A modality that already has a request in flight is not dispatched
        again; its current (pending) state is returned.
        """
        mode = self.controller.mode
        if self.dispatcher.is_pending(mode):
            logger.debug("Submit ignored: request still pending", extra={"mode": mode.value})
            return self.dispatcher.state(mode)

        if mode is InputMode.INGREDIENTS:
            return await self.dispatcher.submit_ingredients()
        if mode is InputMode.PHOTO:
            return await self.dispatcher.submit_photo()
        return await self.dispatcher.submit_dish()
