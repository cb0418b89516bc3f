# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container, get_current_user


router = APIRouter(tags=["posts"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[PostResponse])
async def list_posts(
    container: BaseContainer = Depends(get_container),
) -> List[PostResponse]:
    """
    List all posts

    Returns:
        List of PostResponse objects
    """
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """
    Get a post by ID

    Args:
        post_id: ID of the post

    Returns:
        PostResponse with post information
    """
    get_post_use_case = container.get(GetPostUseCase)
    return await get_post_use_case.execute(post_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """
    Create a new post

    Args:
        request: Post creation request

    Returns:
        PostResponse with created post information
    """
    create_post_use_case = container.get(CreatePostUseCase)
    return await create_post_use_case.execute(request)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """
    Update title, content and/or author of a post

    Args:
        post_id: ID of the post; must match `id` in the body
        request: Partial update request

    Returns:
        PostResponse with the updated post
    """
    update_post_use_case = container.get(UpdatePostUseCase)
    return await update_post_use_case.execute(post_id, request)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    container: BaseContainer = Depends(get_container),
) -> Response:
    """Delete a post; succeeds whether or not the post existed"""
    delete_post_use_case = container.get(DeletePostUseCase)
    await delete_post_use_case.execute(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
