from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "ActionMode",
    "PathKind",
    "PathInfo",
]


class ActionMode(str, Enum):
    view = "view"
    create = "create"
    edit = "edit"


class PathKind(str, Enum):
    item = "item"
    global_list = "global_list"
    create = "create"
    context_list = "context_list"


class PathInfo(BaseModel):
    """Information decomposed from a canonical resource path.

    Fields are snake_case in Python; `model_dump(by_alias=True, exclude_none=True)`
    yields the camelCase record UI code consumes (`resourceName`, `pubId`, ...).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    resource_name: str
    pub_id: Optional[str] = None
    is_uuid: Optional[bool] = None  # None when the path carries no identifier
    ctx_resource_name: Optional[str] = None
    ctx_pub_id: Optional[str] = None
    is_item: bool
    is_list: bool
    action_mode: ActionMode = ActionMode.view

    @model_validator(mode="after")
    def _item_xor_list(self) -> "PathInfo":
        if self.is_item == self.is_list:
            raise ValueError("exactly one of is_item/is_list must be true")
        return self
