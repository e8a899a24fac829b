import re
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
JS_CALLABLE_RE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


class NodeRow(BaseModel):
    kind: Literal["node"] = "node"
    label: str
    value: Any
    id: int
    open: bool = False
    has_children: bool = False


class EndBlockMarker(BaseModel):
    kind: Literal["end"] = "end"


RowRecord = Annotated[Union[NodeRow, EndBlockMarker], Field(discriminator="kind")]

END_BLOCK = EndBlockMarker()


class WidgetConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    data: Any
    title: str
    button_label: str = "Choose"
    height: int = Field(default=300, gt=0)
    width: int = Field(default=300, gt=0)
    indent_width: int = Field(default=25, ge=0)
    include_css: bool = True
    image_path: str = "."
    onselect: Optional[str] = None
    form_field: Optional[str] = None
    form_field_form: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        if not NAME_RE.match(v):
            raise ValueError("must be alphanumeric and begin with a letter")
        return v

    @field_validator("data")
    @classmethod
    def _check_data(cls, v: Any) -> Any:
        if v is None:
            raise PydanticCustomError("missing", "Field required")
        return v

    @field_validator("include_css", mode="before")
    @classmethod
    def _truthy_css(cls, v: Any) -> bool:
        # any false-looking value turns the stylesheet off
        if isinstance(v, str):
            return v.strip().lower() not in ("", "0", "false", "no", "off")
        return bool(v)

    @field_validator("image_path")
    @classmethod
    def _fix_image_path(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @field_validator("onselect")
    @classmethod
    def _check_onselect(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not JS_CALLABLE_RE.match(v):
            raise ValueError("must be a javascript function name")
        return v


class RenderParams(BaseModel):
    name: str
    title: str
    button_label: str
    height: int
    width: int
    indent_width: int
    include_css: bool
    image_path: str
    onselect: Optional[str] = None
    form_field: Optional[str] = None
    form_field_form: Optional[str] = None
    rows: List[RowRecord] = []
