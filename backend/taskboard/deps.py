from fastapi import Request

from .services.board import BoardService


def get_service(request: Request) -> BoardService:
    return request.app.state.service
