"""
Task Manager Router

Provides endpoints for task categories and tasks.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from cinedex.config import get_settings
from cinedex.core.database import DbSession
from cinedex.core.ordering import order_from_query
from cinedex.models.contracts.common import IdResponse
from cinedex.models.contracts.pagination import PaginatedRecords, PaginationMeta
from cinedex.models.contracts.task import CategoryCreate, TaskCreate, TaskPublic, TaskUpdate
from cinedex.models.orm.task import Task
from cinedex.repositories.task import CategoryRepository, TaskRepository

logger = logging.getLogger(__name__)

categories_router = APIRouter(prefix="/api/categories", tags=["categories"])
router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _to_public(task: Task) -> TaskPublic:
    """Convert Task ORM model to public response."""
    return TaskPublic(
        id=str(task.id),
        title=task.title,
        description=task.description,
        category_id=str(task.category_id),
        category_name=task.category.name if task.category else None,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


@categories_router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_category(category_data: CategoryCreate, db: DbSession) -> IdResponse:
    """Create a task category."""
    category = await CategoryRepository(db).save_entity(name=category_data.name)
    logger.info(f"Category created: {category.name}", extra={"category_id": str(category.id)})
    return IdResponse(id=str(category.id))


@router.get("", response_model=PaginatedRecords[TaskPublic])
async def list_tasks(
    db: DbSession,
    page_size: int = Query(..., alias="pageSize", ge=1, le=100, description="Tasks per page"),
    page_no: int = Query(..., alias="pageNo", ge=1, description="Page number (1-indexed)"),
    order_by: str | None = Query(None, alias="orderBy", min_length=1, description="Sort fields"),
) -> PaginatedRecords[TaskPublic]:
    """
    List tasks one page at a time, each with its category name.

    Args:
        db: Database session
        page_size: Tasks per page
        page_no: Page number
        order_by: Comma separated sort fields, ``-`` prefix for descending

    Returns:
        Page metadata and the tasks on the page
    """
    order = order_from_query(
        order_by,
        TaskRepository.SORT_FIELDS,
        entity="tasks",
        strict=get_settings().strict_ordering,
    )
    tasks, meta = await TaskRepository(db).get_page(
        page_size=page_size, page_no=page_no, order=order
    )
    return PaginatedRecords[TaskPublic](
        meta=PaginationMeta.from_metadata(meta),
        records=[_to_public(task) for task in tasks],
    )


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task_data: TaskCreate, db: DbSession) -> IdResponse:
    """
    Create a task in a category.

    A category id that does not exist is reported as a conflict by the
    integrity error handler.
    """
    task = await TaskRepository(db).save_entity(
        title=task_data.title,
        description=task_data.description,
        category_id=task_data.category_id,
    )
    logger.info(
        f"Task created: {task.title}",
        extra={"task_id": str(task.id), "category_id": str(task.category_id)},
    )
    return IdResponse(id=str(task.id))


@router.put("", response_model=IdResponse)
async def update_task(task_data: TaskUpdate, db: DbSession) -> IdResponse:
    """
    Replace the title, description and category of a task.

    Raises:
        HTTPException: If task not found
    """
    found = await TaskRepository(db).patch_entity(
        task_data.id,
        {
            "title": task_data.title,
            "description": task_data.description,
            "category_id": task_data.category_id,
        },
    )
    if not found:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )

    logger.info("Task updated", extra={"task_id": str(task_data.id)})
    return IdResponse(id=str(task_data.id))
