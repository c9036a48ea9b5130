"""
Bugboard — Error Boundary
===========================

What:  A fault barrier around a child renderer.
How:   Explicit two-state machine:

        ┌────────┐  child render fails / fault()  ┌─────────┐
        │ NORMAL │ ─────────────────────────────▶ │ FAULTED │
        └────────┘ ◀───────────────────────────── └─────────┘
                          reset() (user action)

    - NORMAL renders the children. A failure while rendering switches to
      FAULTED and renders the fallback instead.
    - FAULTED is sticky: render() keeps returning the fallback, without
      calling the children again, until reset() is invoked.
    - Each fault increments error_count by one and calls on_error exactly
      once. error_count survives reset() for the life of the instance.
    - Diagnostic detail (error text and traceback) is only rendered in
      development mode.
"""

import enum
import logging
import traceback
from typing import Callable, Optional

from app.config import settings
from app.ui.rendering import render as render_template

logger = logging.getLogger(__name__)


class BoundaryState(enum.Enum):
    NORMAL = "normal"
    FAULTED = "faulted"


class ErrorBoundary:

    def __init__(
        self,
        children: Callable[[], str],
        on_error: Optional[Callable[[BaseException, str], None]] = None,
        show_error_count: bool = False,
        development: Optional[bool] = None,
        fallback: Optional[Callable[["ErrorBoundary"], str]] = None,
    ):
        """
        Args:
            children:         renders the wrapped subtree
            on_error:         called with (error, formatted traceback) per fault
            show_error_count: render "Error count: N" in the fallback
            development:      show diagnostics; defaults to settings.is_development
            fallback:         custom fallback renderer replacing the default view
        """
        self.children = children
        self.on_error = on_error
        self.show_error_count = show_error_count
        self.development = settings.is_development if development is None else development
        self.fallback = fallback

        self.state = BoundaryState.NORMAL
        self.error: Optional[BaseException] = None
        self.error_info: Optional[str] = None
        self.error_count = 0

    @property
    def has_error(self) -> bool:
        return self.state is BoundaryState.FAULTED

    def render(self) -> str:
        if self.state is BoundaryState.FAULTED:
            return self.render_fallback()
        try:
            return self.children()
        except Exception as e:
            self.fault(e)
            return self.render_fallback()

    def fault(self, error: BaseException) -> None:
        """
        Enter FAULTED. Also the hook for failures raised outside render()
        (event handlers, lifecycle callbacks) that the host wants trapped.
        """
        if self.state is BoundaryState.FAULTED:
            return
        self.state = BoundaryState.FAULTED
        self.error = error
        self.error_info = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        self.error_count += 1

        logger.error("Error caught by ErrorBoundary: %s", error, extra={"error_count": self.error_count})
        if self.on_error is not None:
            self.on_error(error, self.error_info)

    def reset(self) -> None:
        """The "Try Again" action: back to NORMAL, children render on next call."""
        self.state = BoundaryState.NORMAL
        self.error = None
        self.error_info = None

    def render_fallback(self) -> str:
        if self.fallback is not None:
            return self.fallback(self)
        details = None
        if self.development and self.error is not None:
            details = f"{self.error}\n{self.error_info or ''}"
        return render_template(
            "error_fallback.html",
            details=details,
            error_count=self.error_count if self.show_error_count else None,
        )
