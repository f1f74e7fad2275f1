"""
Jinja2 rendering for transactional emails.

HTML templates are autoescaped, so customer-supplied values can never
inject markup into the operator's inbox. Plain text templates are
rendered verbatim.

Dependencies: jinja2
System role: Email body rendering
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache
def get_email_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=False,
    )


def render_email(template_name: str, **context) -> str:
    """
    Render one email template.

    Args:
        template_name: File name under the templates directory
        **context: Template variables

    Returns:
        str: Rendered body
    """
    return get_email_environment().get_template(template_name).render(**context)
