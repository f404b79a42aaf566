"""
Navigation registry

Holds the process-wide menu customization callbacks and resolves them into
fresh Menu trees for each request.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from models.menu import InvalidArgumentError, Menu, MenuEntry, MenuItem
from settings import LOGOUT_LABEL, LOGOUT_URL, logger


UserMenuCallback = Callable[[Any, Menu], Optional[Menu]]
MainMenuCallback = Callable[[Any], Union[Menu, List[MenuEntry], None]]


def default_logout_item() -> MenuItem:
    """The "Sign out" entry every user menu starts with."""
    return (
        MenuItem.make(LOGOUT_LABEL, LOGOUT_URL)
        .with_icon("arrow-right-on-rectangle")
        .with_meta("method", "post")
        .with_meta("default", True)
    )


class NavigationRegistry:
    """Registration point for the user menu and main menu callbacks."""

    def __init__(self):
        self._user_menu_callback: Optional[UserMenuCallback] = None
        self._main_menu_callback: Optional[MainMenuCallback] = None

    # User menu

    def user_menu(self, callback: UserMenuCallback) -> None:
        """Register the user menu callback, replacing any previous one."""
        self._user_menu_callback = callback
        logger.info("User menu callback registered", extra={
            "callback": getattr(callback, "__name__", repr(callback))
        })

    def clear_user_menu(self) -> None:
        self._user_menu_callback = None
        logger.debug("User menu callback cleared")

    def has_custom_user_menu(self) -> bool:
        return self._user_menu_callback is not None

    def resolve_user_menu(self, request: Any) -> Optional[Menu]:
        """
        Build the user menu for a request.

        Args:
            request: Request-like object handed to the callback

        Returns:
            The resolved Menu, always holding one default Sign out item,
            or None when no callback is registered

        Raises:
            InvalidArgumentError: If the callback added anything but MenuItem objects
        """
        if self._user_menu_callback is None:
            return None

        menu = Menu([default_logout_item()])
        result = self._user_menu_callback(request, menu)
        if isinstance(result, Menu):
            menu = result

        for entry in menu:
            if not isinstance(entry, MenuItem):
                logger.error("User menu contains a non-item entry", extra={
                    "entry_type": type(entry).__name__,
                    "entry_label": getattr(entry, "label", None)
                })
                raise InvalidArgumentError("User menu only supports MenuItem objects")

        # A menu returned in place of the seeded one still gets the Sign out entry
        if not any(entry.meta.get("default") for entry in menu):
            menu.append(default_logout_item())

        logger.debug("User menu resolved", extra={"item_count": menu.count()})
        return menu

    # Main menu

    def main_menu(self, callback: MainMenuCallback) -> None:
        """Register the main menu callback, replacing any previous one."""
        self._main_menu_callback = callback
        logger.info("Main menu callback registered", extra={
            "callback": getattr(callback, "__name__", repr(callback))
        })

    def clear_main_menu(self) -> None:
        self._main_menu_callback = None
        logger.debug("Main menu callback cleared")

    def has_custom_main_menu(self) -> bool:
        return self._main_menu_callback is not None

    def resolve_main_menu(self, request: Any) -> Optional[Menu]:
        """Build the main menu for a request, or None when no callback is registered."""
        if self._main_menu_callback is None:
            return None

        result = self._main_menu_callback(request)
        if isinstance(result, Menu):
            menu = result
        else:
            menu = Menu(result or [])

        logger.debug("Main menu resolved", extra={"entry_count": menu.count()})
        return menu

    @staticmethod
    def serialize_menu(menu: Optional[Menu], request: Any = None) -> List[Dict[str, Any]]:
        """Serialize only the entries the request is allowed to see."""
        if menu is None:
            return []
        return menu.to_array(request, visible_only=True)
