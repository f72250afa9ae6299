"""
JSON Patch operations, see https://datatracker.ietf.org/doc/html/rfc6902

A patch document is a list of operations, discriminated by their `op` member:
```json
[
    {"op": "replace", "path": "/title", "value": "Duna"},
    {"op": "copy", "from": "/title", "path": "/genre"}
]
```
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class PatchAdd(BaseModel):
    op: Literal["add"]
    path: str
    value: Any


class PatchRemove(BaseModel):
    op: Literal["remove"]
    path: str


class PatchReplace(BaseModel):
    op: Literal["replace"]
    path: str
    value: Any


class PatchMove(BaseModel):
    op: Literal["move"]
    from_: str = Field(alias="from")
    path: str

    model_config = ConfigDict(populate_by_name=True)


class PatchCopy(BaseModel):
    op: Literal["copy"]
    from_: str = Field(alias="from")
    path: str

    model_config = ConfigDict(populate_by_name=True)


class PatchTest(BaseModel):
    op: Literal["test"]
    path: str
    value: Any


PatchOperation = Annotated[
    PatchAdd | PatchRemove | PatchReplace | PatchMove | PatchCopy | PatchTest,
    Field(discriminator="op"),
]
