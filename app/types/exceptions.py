from typing import Any

from fastapi import HTTPException


class ContentHTTPException(HTTPException):
    """
    A custom HTTPException allowing to return custom content.

    Instead of returning `{detail: <content>}`, this exception can return a json serialized `<content>`.

    You need to define a custom exception handler to use it:
    ```python
    @app.exception_handler(ContentHTTPException)
    async def content_exception_handler(
        request: Request,
        exc: ContentHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.content),
            headers=exc.headers,
        )
    ```
    """

    def __init__(
        self,
        status_code: int,
        content: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=content, headers=headers)
        self.content = content


class ValidationHTTPException(ContentHTTPException):
    """
    A 400 response listing the violated rules, using the same shape as request validation errors:
    `{"detail": [{"loc": [...], "msg": "...", "type": "..."}]}`
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(status_code=400, content={"detail": errors})
        self.errors = errors


class JsonPatchError(ValueError):
    """
    Raised when a JSON Patch operation can not be applied to a document.
    """

    def __init__(self, index: int, path: str, message: str):
        super().__init__(f"Operation {index} on {path}: {message}")
        self.index = index
        self.path = path
        self.message = message

    def to_error(self) -> dict[str, Any]:
        return {
            "loc": ["body", self.index],
            "msg": self.message,
            "type": "json_patch_error",
            "input": self.path,
        }


class DotenvMissingVariableError(Exception):
    def __init__(self, variable_name: str):
        super().__init__(f"{variable_name} should be configured in the dotenv")


class DotenvInvalidVariableError(Exception):
    pass


class InvalidAppStateTypeError(Exception):
    def __init__(self):
        super().__init__("The application state is not a dict nor a starlette State")
