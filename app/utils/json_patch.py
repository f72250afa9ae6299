import copy
from collections.abc import Sequence
from typing import Any, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ValidationError

from app.types.exceptions import JsonPatchError, ValidationHTTPException
from app.types.json_patch import (
    PatchAdd,
    PatchCopy,
    PatchMove,
    PatchOperation,
    PatchRemove,
    PatchReplace,
    PatchTest,
)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def resolve_field(pointer: str, document: dict[str, Any], index: int) -> str:
    """
    Return the member of `document` targeted by the JSON pointer.

    Documents are flat projections of a schema: only pointers of the form `/<field>`
    naming an existing member are valid. `~1` and `~0` are unescaped as described in RFC 6901.
    """
    if not pointer.startswith("/"):
        raise JsonPatchError(index, pointer, "Path must start with '/'")
    tokens = pointer[1:].split("/")
    if len(tokens) != 1:
        raise JsonPatchError(index, pointer, "Nested paths are not supported")
    field = tokens[0].replace("~1", "/").replace("~0", "~")
    if field not in document:
        raise JsonPatchError(index, pointer, f"Unknown field '{field}'")
    return field


def json_equals(left: Any, right: Any) -> bool:
    """
    Compare two JSON values as described for the `test` operation in RFC 6902.

    Unlike Python equality, booleans are not numbers: `true` does not equal `1`.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, int | float) and isinstance(right, int | float):
        return left == right
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            json_equals(value, right[key]) for key, value in left.items()
        )
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            json_equals(a, b) for a, b in zip(left, right, strict=True)
        )
    return type(left) is type(right) and left == right


def apply_json_patch(
    document: dict[str, Any],
    operations: Sequence[PatchOperation],
) -> dict[str, Any]:
    """
    Apply the operations in order and return the patched copy of `document`.

    The document is never modified: if an operation fails, a `JsonPatchError` is raised
    and none of the operations are applied.

    As the document has a fixed shape, `remove` resets the member to `None`
    and `add` on an existing member replaces it.
    """
    patched = copy.deepcopy(document)

    for index, operation in enumerate(operations):
        field = resolve_field(operation.path, patched, index)

        match operation:
            case PatchAdd() | PatchReplace():
                patched[field] = copy.deepcopy(operation.value)
            case PatchRemove():
                patched[field] = None
            case PatchMove():
                source = resolve_field(operation.from_, patched, index)
                if source != field:
                    patched[field] = patched[source]
                    patched[source] = None
            case PatchCopy():
                source = resolve_field(operation.from_, patched, index)
                patched[field] = copy.deepcopy(patched[source])
            case PatchTest():
                if not json_equals(patched[field], operation.value):
                    raise JsonPatchError(
                        index,
                        operation.path,
                        f"Test failed, expected {operation.value!r} but found {patched[field]!r}",
                    )

    return patched


def patch_schema(
    schema: SchemaT,
    operations: Sequence[PatchOperation],
) -> SchemaT:
    """
    Apply a JSON Patch document to a schema and validate the result against the same schema class.

    A `ValidationHTTPException` (400) is raised if an operation can not be applied
    or if the patched object does not respect the schema constraints.
    """
    try:
        patched = apply_json_patch(schema.model_dump(), operations)
    except JsonPatchError as error:
        raise ValidationHTTPException([error.to_error()]) from error

    try:
        return schema.__class__.model_validate(patched)
    except ValidationError as error:
        raise ValidationHTTPException(
            jsonable_encoder(error.errors(include_url=False, include_context=False)),
        ) from error
