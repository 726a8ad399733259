"""
Plain-text HTTP error rendering

Both services answer errors with the bare message as a text/plain body
(e.g. "invalid zipcode"), never FastAPI's default {"detail": ...} JSON.
"""
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render an HTTPException as its detail string"""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the plain-text handler for every HTTPException, including routing 404/405"""
    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)


__all__ = ["register_error_handlers", "plain_text_http_exception_handler"]
