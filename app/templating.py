## Shared Jinja2 environment
from pathlib import Path

from fastapi.templating import Jinja2Templates
from markdown_it import MarkdownIt
from markupsafe import Markup

from app.roadmaps.view import section_icon

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

md = MarkdownIt("js-default")  # raw HTML in generated text is escaped, not rendered


def inline_markdown(text: str) -> Markup:
    # **bold**, `code` and friends inside a single item line
    return Markup(md.renderInline(text or ""))


templates.env.filters["inline_md"] = inline_markdown
templates.env.filters["section_icon"] = section_icon
