import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import ValidationError

from core.errors import ConfigurationError
from core.flatten import check_balanced, flatten
from core.ids import IdAllocator
from core.schemas import RenderParams, WidgetConfig

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "popup_tree_select.html"

_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


class PopupTreeSelect:
    """HTML popup tree selector.

    Build it with the tree and display options, then call ``render()`` and
    embed the returned markup in a page. Several selectors can share a page
    as long as their names differ.

    Args:
        name: unique selector name, alphanumeric and starting with a letter
        data: root node (TreeNode or mapping with label/value/open/children)
        title: title of the popup window
        button_label: label of the button that opens the popup
        height, width: size of the scrollable tree area, in pixels
        indent_width: indentation of each children block, in pixels
        include_css: a false value (False, 0, None, "", "0", "false") leaves out
            the default stylesheet so you can supply your own
        image_path: URL prefix of the widget images
        onselect: javascript function called with the selected value
        form_field, form_field_form: form field (and form) receiving the value
        allocator: id source, the process-wide one by default
    """

    def __init__(self, allocator: Optional[IdAllocator] = None, **options):
        try:
            self.config = WidgetConfig(**options)
        except ValidationError as e:
            err = e.errors()[0]
            option = ".".join(str(p) for p in err["loc"]) or "options"
            message = "Missing required parameter" if err["type"] == "missing" else err["msg"]
            logger.warning("invalid widget option %s: %s", option, message)
            raise ConfigurationError(option, message) from None

        self.allocator = allocator

    @property
    def name(self) -> str:
        return self.config.name

    def render_params(self) -> RenderParams:
        rows = flatten(self.config.data, allocator=self.allocator)
        check_balanced(rows)

        return RenderParams(
            rows=rows,
            **self.config.model_dump(exclude={"data"}),
        )

    def render(self) -> str:
        params = self.render_params()
        template = _env.get_template(TEMPLATE_NAME)
        return template.render(**dict(params))

    # older name, kept for existing callers
    output = render
