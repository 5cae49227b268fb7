from __future__ import annotations

from .models import TodoPayload
from .responses import APIResponse, ErrorCodes


def success(payload: TodoPayload) -> APIResponse[TodoPayload]:
    return APIResponse[TodoPayload].success(payload)


def failure(error: BaseException | str) -> APIResponse[TodoPayload]:
    return APIResponse[TodoPayload].failure(ErrorCodes.DB_001, str(error))
