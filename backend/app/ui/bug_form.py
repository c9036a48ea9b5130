"""Bug report form: two local text fields and a submit action."""

from typing import Callable, Dict

from app.ui.rendering import render


class BugForm:
    """
    Holds the title and description being typed.

    submit():
        - stripped title empty → nothing happens (no callback, fields kept)
        - otherwise on_create({"title", "description"}) with stripped values,
          then both fields are cleared
    """

    def __init__(self, on_create: Callable[[Dict[str, str]], None]):
        if on_create is None:
            raise TypeError("BugForm requires an on_create callback")
        self.on_create = on_create
        self.title = ""
        self.description = ""

    def set_title(self, value: str) -> None:
        self.title = value

    def set_description(self, value: str) -> None:
        self.description = value

    def submit(self) -> bool:
        """Returns True when the creation callback was invoked."""
        title = self.title.strip()
        if not title:
            return False
        self.on_create({"title": title, "description": self.description.strip()})
        self.title = ""
        self.description = ""
        return True

    def render(self) -> str:
        return render("bug_form.html", title=self.title, description=self.description)
