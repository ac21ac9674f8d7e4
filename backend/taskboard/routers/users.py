from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_service
from ..schemas.users import User, UserCreate, UsersResponse
from ..services.board import BoardService, parse_int

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UsersResponse)
def list_users(service: BoardService = Depends(get_service)):
    users = service.list_users()
    return UsersResponse(users=users, count=len(users))


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, service: BoardService = Depends(get_service)):
    if not payload.name or not payload.email or not payload.role or "@" not in payload.email:
        raise HTTPException(status_code=400, detail="Missing required fields")

    return service.create_user(User(name=payload.name, email=payload.email, role=payload.role))


@router.get("/{user_id:path}", response_model=User)
def get_user(user_id: str, service: BoardService = Depends(get_service)):
    uid = parse_int(user_id)
    if uid is None:
        raise HTTPException(status_code=400, detail="Invalid user ID")
    return service.get_user(uid)
