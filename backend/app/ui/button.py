"""Presentational button with a closed set of variants and sizes."""

from typing import Any, Callable, Optional

from app.ui.rendering import render

VARIANTS = {"primary": "btn-primary", "secondary": "btn-secondary", "danger": "btn-danger"}
SIZES = {"sm": "btn-sm", "md": "btn-md", "lg": "btn-lg"}


def button_classes(
    variant: str = "primary",
    size: str = "md",
    disabled: bool = False,
    class_name: str = "",
) -> str:
    """
    Space-separated class list.

    Unknown variants fall back to primary and unknown sizes to md, so the
    result is always one variant class and one size class.
    """
    classes = [
        VARIANTS.get(variant, VARIANTS["primary"]),
        SIZES.get(size, SIZES["md"]),
        "btn-disabled" if disabled else "",
        class_name,
    ]
    return " ".join(c for c in classes if c)


class Button:

    def __init__(
        self,
        label: str,
        variant: str = "primary",
        size: str = "md",
        disabled: bool = False,
        class_name: str = "",
        on_click: Optional[Callable[[Any], None]] = None,
        type: str = "button",
    ):
        self.label = label
        self.variant = variant
        self.size = size
        self.disabled = disabled
        self.class_name = class_name
        self.on_click = on_click
        self.type = type

    @property
    def classes(self) -> str:
        return button_classes(self.variant, self.size, self.disabled, self.class_name)

    def click(self, event: Any = None) -> bool:
        """Forward a click to on_click. Returns False when it was suppressed."""
        if self.disabled or self.on_click is None:
            return False
        self.on_click(event)
        return True

    def render(self) -> str:
        return render(
            "button.html",
            type=self.type,
            classes=self.classes,
            disabled=self.disabled,
            label=self.label,
        )
