"""Collect raw publish parameters from a request."""

from starlette.datastructures import UploadFile
from starlette.requests import Request

from datayoinker.domain.shared.error import ValidationError

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _group(pairs: list[tuple[str, object]], into: dict[str, list[str]]) -> None:
    for name, value in pairs:
        if not isinstance(value, str):
            kind = "file upload" if isinstance(value, UploadFile) else type(value).__name__
            raise ValidationError(
                f"Parameter '{name}' is a {kind}, only text values are accepted",
                code="invalid_parameter",
                field=name,
            )
        into.setdefault(name, []).append(value)


async def collect_params(request: Request) -> dict[str, list[str]]:
    """Every parameter name with all of its values, query string and form body combined.

    Values are never collapsed here so that repeated names stay detectable.

    Raises:
        ValidationError: If a POST body is neither urlencoded nor multipart form data.
    """
    params: dict[str, list[str]] = {}
    _group(request.query_params.multi_items(), params)

    if request.method == "POST":
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(_FORM_CONTENT_TYPES):
            async with request.form() as form:
                _group(form.multi_items(), params)
        elif await request.body():
            raise ValidationError(
                f"Unsupported body content type {content_type or 'none'!r}, "
                "send query parameters or a form body",
                code="invalid_parameter",
                detail="Error reading request body",
            )

    return params
