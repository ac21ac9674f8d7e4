from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..deps import get_service
from ..schemas.tasks import Task, TaskCreate, TasksResponse, TaskUpdate
from ..services.board import BoardService, parse_int

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=TasksResponse)
def list_tasks(
    status_filter: str = Query("", alias="status"),
    user_id: str = Query("", alias="userId"),
    service: BoardService = Depends(get_service),
):
    tasks = service.list_tasks(status_filter, user_id)
    return TasksResponse(tasks=tasks, count=len(tasks))


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskCreate, service: BoardService = Depends(get_service)):
    if not payload.title or not payload.status or payload.user_id == 0:
        raise HTTPException(status_code=400, detail="Missing required fields")

    return service.create_task(Task(title=payload.title, status=payload.status, user_id=payload.user_id))


@router.put("/{task_id:path}", response_model=Task)
def update_task(task_id: str, payload: TaskUpdate, service: BoardService = Depends(get_service)):
    tid = parse_int(task_id)
    if tid is None:
        raise HTTPException(status_code=400, detail="Invalid task ID")
    return service.update_task(tid, payload)
