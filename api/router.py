import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from markupsafe import escape
from sqlalchemy.orm import Session

from app.widget import PopupTreeSelect
from core.auth import require_auth
from core.errors import TreeSelectError
from core.settings import get_settings
from db.nodes import load_tree
from db.session import get_db
from models.node import example_tree

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_auth)])

PAGE = """<!DOCTYPE html>
<html>
<head><title>{title}</title></head>
<body>
<form name="{form}" onsubmit="return false;">
  <input type="text" name="{field}" readonly>
  {widget}
</form>
</body>
</html>
"""


def _page(widget: PopupTreeSelect, form: str, field: str) -> HTMLResponse:
    try:
        markup = widget.render()
    except TreeSelectError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return HTMLResponse(PAGE.format(title="Popup tree select", form=escape(form), field=escape(field), widget=markup))


def _widget(**options) -> PopupTreeSelect:
    try:
        return PopupTreeSelect(image_path=get_settings().image_path, **options)
    except TreeSelectError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/demo", response_class=HTMLResponse)
def demo():
    widget = _widget(
        name="category",
        data=example_tree(),
        title="Select a Category",
        form_field="category",
        form_field_form="demo",
    )
    return _page(widget, form="demo", field="category")


@router.get("/trees/{root_id}/widget", response_class=HTMLResponse)
def stored_tree_widget(
    root_id: int,
    name: str = Query(default="tree"),
    title: str = Query(default="Select an item"),
    form_field: str = Query(default="selected"),
    session: Session = Depends(get_db),
):
    root = load_tree(session, root_id)
    if root is None:
        logger.info("tree %s not found", root_id)
        raise HTTPException(status_code=404, detail=f"Tree {root_id} not found")

    widget = _widget(name=name, data=root, title=title, form_field=form_field, form_field_form="tree")
    return _page(widget, form="tree", field=form_field)
