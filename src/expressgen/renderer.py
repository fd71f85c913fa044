"""Render the bodies of generated files from Jinja2 templates.

Templates live in ``templates/`` next to this module, one per generated
file. Rendering is pure string interpolation: nothing here touches the
filesystem of the target project.

Every rendered body ends with exactly one newline.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory."""

ROUTER_INDEX_PATH = "src/routes/index.js"
"""Location of the router-aggregator file inside a generated project."""


@lru_cache(maxsize=1)
def _create_jinja_env() -> Environment:
    """Create the Jinja2 environment for project templates.

    Autoescape stays off for everything except HTML since the templates
    produce JavaScript and dotfiles. ``StrictUndefined`` turns a missing
    variable into an error instead of an empty string.
    """
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html",), default=False),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render(template_name: str, **context: object) -> str:
    """Render *template_name* with *context*, normalised to one trailing newline."""
    body = _create_jinja_env().get_template(template_name).render(**context)
    return body.strip() + "\n"


def render_core_files(port: int = 8080, firebase: bool = False) -> dict[str, str]:
    """Return the fixed source files of a new project, keyed by relative path.

    ``src/lib/firebase.js`` is only included when *firebase* is set.
    """
    files = {
        "src/app.js": render("app.js.j2"),
        "src/server.js": render("server.js.j2", port=port),
        ROUTER_INDEX_PATH: render("routes_index.js.j2"),
    }
    if firebase:
        files["src/lib/firebase.js"] = render("firebase.js.j2")
    return files


def render_dotfiles(port: int = 8080) -> dict[str, str]:
    """Return ``.env`` and ``.gitignore`` for a new project."""
    return {
        ".env": render("env.j2", port=port),
        ".gitignore": render("gitignore.j2"),
    }


def render_resource_files(name: str) -> dict[str, str]:
    """Return the controller and route files for resource *name*.

    Both bodies depend on *name* only.
    """
    return {
        f"src/controllers/{name}.js": render("controller.js.j2", name=name),
        f"src/routes/{name}.js": render("route.js.j2", name=name),
    }
