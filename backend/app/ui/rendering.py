"""Jinja2 environment and templates shared by the UI components."""

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

_TEMPLATES = {
    "button.html": (
        '<button type="{{ type }}" class="{{ classes }}"{% if disabled %} disabled{% endif %}>'
        "{{ label }}</button>"
    ),
    "bug_form.html": (
        '<form aria-label="bug-form">'
        '<div><label for="bug-title">Title</label>'
        '<input id="bug-title" name="title" value="{{ title }}"></div>'
        '<div><label for="bug-desc">Description</label>'
        '<textarea id="bug-desc" name="description">{{ description }}</textarea></div>'
        '<button type="submit">Report Bug</button>'
        "</form>"
    ),
    "bug_list.html": (
        "<div><h2>Reported Bugs</h2><ul>"
        "{% for bug in bugs %}"
        '<li data-testid="bug-{{ bug.id }}">'
        "<strong>{{ bug.title }}</strong> - <span>{{ bug.status }}</span>"
        "{% if bug.created %} <small>{{ bug.created }}</small>{% endif %}"
        "<p>{{ bug.description or '' }}</p>"
        '<label for="status-{{ bug.id }}">Status</label>'
        '<select id="status-{{ bug.id }}" aria-label="status-select-{{ bug.id }}">'
        "{% for option in statuses %}"
        '<option value="{{ option }}"{% if option == bug.status %} selected{% endif %}>{{ option }}</option>'
        "{% endfor %}"
        "</select>"
        '<button type="button" data-action="delete" data-bug-id="{{ bug.id }}">Delete</button>'
        "</li>"
        "{% endfor %}"
        "</ul></div>"
    ),
    "error_fallback.html": (
        '<div class="error-boundary" role="alert">'
        "<h2>Something went wrong</h2>"
        "<p>An unexpected error occurred in the application.</p>"
        "{% if details %}"
        "<details><summary>Error details (development only)</summary>"
        "<pre>{{ details }}</pre></details>"
        "{% endif %}"
        '<button type="button" data-action="reset">Try Again</button>'
        "{% if error_count is not none %}<p>Error count: {{ error_count }}</p>{% endif %}"
        "</div>"
    ),
}

_ENV = Environment(
    loader=DictLoader(_TEMPLATES),
    undefined=StrictUndefined,
    autoescape=select_autoescape(default=True, default_for_string=True),
)


def render(template_name: str, **context: Any) -> str:
    return _ENV.get_template(template_name).render(**context)
