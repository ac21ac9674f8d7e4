from typing import Any, Mapping, Optional

from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask


class ApiJSONResponse(JSONResponse):
    """JSON response that is always readable cross-origin."""

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        media_type: Optional[str] = None,
        background: Optional[BackgroundTask] = None,
    ) -> None:
        merged = {"Access-Control-Allow-Origin": "*"}
        merged.update(headers or {})
        super().__init__(content, status_code, merged, media_type, background)
