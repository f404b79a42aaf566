from fastapi import APIRouter, Depends, HTTPException, Request, status
from helpers.navigation import NavigationRegistry, default_logout_item
from models.menu import InvalidArgumentError, Menu
from registry import get_navigation
from settings import logger
from .schemas.navigation import MainMenuResponse, UserMenuResponse

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("/main")
async def get_main_menu(
    request: Request,
    navigation: NavigationRegistry = Depends(get_navigation)
) -> MainMenuResponse:
    """Get the main navigation tree for the current request."""

    try:
        menu = navigation.resolve_main_menu(request)
    except InvalidArgumentError as e:
        logger.error("Main menu resolution failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    items = navigation.serialize_menu(menu, request)

    return MainMenuResponse(
        items=items,
        total_count=len(items)
    )


@router.get("/user")
async def get_user_menu(
    request: Request,
    navigation: NavigationRegistry = Depends(get_navigation)
) -> UserMenuResponse:
    """Get the user menu, falling back to the default sign out link."""

    try:
        menu = navigation.resolve_user_menu(request)
    except InvalidArgumentError as e:
        logger.error("User menu resolution failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    is_custom = menu is not None
    if menu is None:
        menu = Menu([default_logout_item()])

    items = navigation.serialize_menu(menu, request)

    return UserMenuResponse(
        items=items,
        total_count=len(items),
        is_custom=is_custom
    )
