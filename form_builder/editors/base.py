"""
Editors - Base Editor

Plain-state editor with explicit change notifications.
"""

import logging
from typing import Callable, List, Optional

from form_builder.errors import FormBuilderError, as_form_error

logger = logging.getLogger(__name__)

Listener = Callable[["BaseEditor"], None]


class BaseEditor:
    """Shared change tracking, subscriber list and error capture."""

    def __init__(self):
        self.has_unsaved_changes = False
        self.is_loading = False
        self.error: Optional[FormBuilderError] = None
        self.show_error = False
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dismiss_error(self) -> None:
        self.error = None
        self.show_error = False
        self._notify()

    def _changed(self) -> None:
        self.has_unsaved_changes = True
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _capture(self, exc: BaseException) -> None:
        self.error = as_form_error(exc)
        self.show_error = True
        logger.error(f"{type(self).__name__} failed: {self.error}")
