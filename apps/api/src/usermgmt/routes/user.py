"""User API routes."""

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from usermgmt.config import Settings
from usermgmt.exceptions import validation_error_response
from usermgmt.services import get_app_settings, get_user_service
from usermgmt.services.user_service import UserOutcome, UserResult, UserService
from usermgmt_common.models.user import User

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


def _failure_response(result: UserResult) -> Response:
    if result.outcome is UserOutcome.INVALID:
        return validation_error_response(result.errors)
    if result.outcome is UserOutcome.CONFLICT:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "User with this ID already exists."},
        )
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[User])
@router.get("/", response_model=list[User], include_in_schema=False)
async def list_users(
    page: int = Query(1, description="1-based page number"),
    page_size: int | None = Query(None, alias="pageSize", description="Users per page"),
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
) -> list[User]:
    if page_size is None:
        page_size = settings.default_page_size
    return service.list_users(page, page_size)


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    result = service.get_user(user_id)
    if not result.ok:
        return _failure_response(result)
    return result.user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def add_user(user: User, response: Response, service: UserService = Depends(get_user_service)):
    """Create a user.

    Returns 201 with a Location header, 400 with field errors, or 409 when
    the ID is already taken.
    """
    result = service.create_user(user)
    if not result.ok:
        return _failure_response(result)
    response.headers["Location"] = f"/users/{user.id}"
    return result.user


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(user_id: int, user: User, service: UserService = Depends(get_user_service)) -> Response:
    result = service.replace_user(user_id, user)
    if not result.ok:
        return _failure_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    result = service.remove_user(user_id)
    if not result.ok:
        return _failure_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
