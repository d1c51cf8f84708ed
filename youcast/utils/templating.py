from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from youcast.utils.config import TEMPLATES_FOLDER

_TEMPLATE_SUFFIX = "j2x"
template_env = Environment(
    autoescape=True,
    loader=FileSystemLoader(TEMPLATES_FOLDER),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def get_template(name: str) -> Template:
    """Get a Jinja2 template."""
    return template_env.get_template(f"{name}.{_TEMPLATE_SUFFIX}")
