from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union
from urllib.parse import urlencode
from settings import ADMIN_RESOURCES_PATH
from .helper import (
    call_with_request,
    headline,
    kebab_case,
    pluralize,
    snake_case,
    state_id_from_label,
    strip_suffix,
)


class InvalidArgumentError(ValueError):
    """Raised when a menu is built or resolved with invalid input."""


class BadgeType(str, Enum):
    """Badge styles understood by the frontend."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


class Badge:
    """A badge value paired with its type; the value may be a supplier."""

    def __init__(self, value: Any, badge_type: Union[str, Callable[..., str]] = BadgeType.PRIMARY.value):
        self.value = value
        self.badge_type = badge_type

    @classmethod
    def make(cls, value: Any, badge_type: Union[str, Callable[..., str]] = BadgeType.PRIMARY.value) -> "Badge":
        return cls(value, badge_type)

    def resolve(self, request: Optional[Any] = None) -> Any:
        """Return the badge value, calling the supplier fresh each time."""
        if callable(self.value):
            return call_with_request(self.value, request)
        return self.value

    def resolve_type(self, request: Optional[Any] = None) -> str:
        if callable(self.badge_type):
            return call_with_request(self.badge_type, request)
        return _badge_type_value(self.badge_type)


def _badge_type_value(badge_type: Any) -> Any:
    if isinstance(badge_type, BadgeType):
        return badge_type.value
    return badge_type


class MenuEntry:
    """Behaviour shared by every node of the navigation tree."""

    def __init__(self, label: str):
        if not isinstance(label, str) or not label.strip():
            raise InvalidArgumentError("Menu label cannot be empty")

        self.label = label
        self.icon: Optional[str] = None
        self.badge: Any = None
        self.badge_type: Union[str, Callable[..., str]] = BadgeType.PRIMARY.value
        self.meta: Dict[str, Any] = {}
        self._can_see_callback: Optional[Callable[..., bool]] = None

    def with_icon(self, icon: str):
        self.icon = icon
        return self

    def with_badge(self, badge: Any, badge_type: Union[str, Callable[..., str]] = BadgeType.PRIMARY.value):
        """Set a static badge, a supplier called per resolution, or a Badge instance."""
        self.badge = badge
        self.badge_type = badge_type
        return self

    def with_badge_if(self, badge: Any, badge_type: Union[str, Callable[..., str]], condition: Callable[..., Any]):
        """Set the badge only when condition() is truthy at call time."""
        if call_with_request(condition, None):
            return self.with_badge(badge, badge_type)
        return self

    def with_meta(self, key: Union[str, Dict[str, Any]], value: Any = None):
        """Set one meta key, or merge a dict of keys when key is a dict."""
        if isinstance(key, dict):
            self.meta.update(key)
        else:
            self.meta[key] = value
        return self

    def can_see(self, callback: Callable[..., bool]):
        self._can_see_callback = callback
        return self

    def resolve_badge(self, request: Optional[Any] = None) -> Any:
        if isinstance(self.badge, Badge):
            return self.badge.resolve(request)
        if callable(self.badge):
            return call_with_request(self.badge, request)
        return self.badge

    def resolve_badge_type(self, request: Optional[Any] = None) -> Any:
        if isinstance(self.badge, Badge):
            return self.badge.resolve_type(request)
        if callable(self.badge_type):
            return call_with_request(self.badge_type, request)
        return _badge_type_value(self.badge_type)

    def is_visible(self, request: Optional[Any] = None) -> bool:
        if self._can_see_callback is None:
            return True
        return bool(call_with_request(self._can_see_callback, request))

    def to_array(self, request: Optional[Any] = None, visible_only: bool = False) -> Dict[str, Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


class MenuItem(MenuEntry):
    """A navigable leaf of the menu tree."""

    def __init__(self, label: str, url: Optional[str] = None):
        super().__init__(label)
        self.url = url
        self._base_url: Optional[str] = None
        self._filters: List[tuple] = []

    @classmethod
    def make(cls, label: str, url: Optional[str] = None) -> "MenuItem":
        return cls(label, url)

    @classmethod
    def link(cls, label: str, url: str) -> "MenuItem":
        return cls(label, url)

    @classmethod
    def external_link(cls, label: str, url: str) -> "MenuItem":
        return cls(label, url).with_meta("external", True)

    @classmethod
    def resource(cls, resource: str) -> "MenuItem":
        """Link to a resource index, e.g. "UserResource" -> Users at /admin/resources/users."""
        base_name = strip_suffix(resource, "Resource")
        url = f"{ADMIN_RESOURCES_PATH}/{pluralize(kebab_case(base_name))}"
        return (
            cls(pluralize(base_name), url)
            .with_meta("resource", resource)
        )

    @classmethod
    def filter(cls, label: str, resource: str) -> "MenuItem":
        """Link to a resource index with filters added through applies()."""
        item = cls.resource(resource)
        item.label = label
        return item.with_meta({"type": "filter", "filters": []})

    @classmethod
    def lens(cls, resource: str, lens: str) -> "MenuItem":
        """Link to a resource lens, e.g. ("UserResource", "MostValuableUsers") -> /admin/resources/users/lens/most-valuable-users."""
        base_name = strip_suffix(resource, "Resource")
        url = f"{ADMIN_RESOURCES_PATH}/{pluralize(kebab_case(base_name))}/lens/{kebab_case(lens)}"
        return cls(headline(lens), url).with_meta({
            "type": "lens",
            "resource": resource,
            "lens": lens,
        })

    def applies(self, filter_name: str, value: Any, params: Optional[Dict[str, Any]] = None) -> "MenuItem":
        """
        Add a filters[<key>]=<value> query parameter to the item URL.

        The key is the snake-cased filter name without its "Filter" suffix,
        followed by each parameter value, e.g. AmountFilter with
        {"operator": ">="} -> filters[amount_>=].
        """
        if self.url is None:
            raise InvalidArgumentError("Filters require a menu item with a URL")

        if self._base_url is None:
            self._base_url = self.url

        params = dict(params or {})
        key = snake_case(strip_suffix(filter_name, "Filter"))
        for param in params.values():
            key = f"{key}_{param}"

        self._filters.append((f"filters[{key}]", value))
        self.meta.setdefault("filters", []).append({
            "filter": filter_name,
            "value": value,
            "parameters": params,
        })

        separator = "&" if "?" in self._base_url else "?"
        self.url = self._base_url + separator + urlencode(self._filters, safe="[]@")
        return self

    def open_in_new_tab(self, new_tab: bool = True) -> "MenuItem":
        self.meta["openInNewTab"] = new_tab
        return self

    def method(self, method: str, data: Optional[Dict[str, Any]] = None,
               headers: Optional[Dict[str, str]] = None) -> "MenuItem":
        """Set the HTTP verb (and optional payload) the frontend uses for this link."""
        self.meta["method"] = method.upper()
        if data:
            self.meta["data"] = data
        if headers:
            self.meta["headers"] = headers
        return self

    def to_array(self, request: Optional[Any] = None, visible_only: bool = False) -> Dict[str, Any]:
        return {
            "label": self.label,
            "url": self.url,
            "icon": self.icon,
            "badge": self.resolve_badge(request),
            "badgeType": self.resolve_badge_type(request),
            "meta": dict(self.meta),
        }


class MenuContainer(MenuEntry):
    """An ordered, optionally collapsible container of menu entries."""

    state_prefix = "menu_"

    def __init__(self, label: str, items: Optional[Iterable[MenuEntry]] = None):
        super().__init__(label)
        self.items: List[MenuEntry] = []
        self.is_collapsible = False
        self.is_collapsed = False
        self._state_id: Optional[str] = None

        for item in items or []:
            self.add(item)

    @classmethod
    def make(cls, label: str, items: Optional[Iterable[MenuEntry]] = None):
        return cls(label, items)

    def _check_child(self, item: Any) -> None:
        raise NotImplementedError

    def add(self, item: MenuEntry):
        self._check_child(item)
        self.items.append(item)
        return self

    def collapsible(self, collapsible: bool = True):
        self.is_collapsible = collapsible
        return self

    def collapsed(self, collapsed: bool = True):
        self.is_collapsed = collapsed
        return self

    def state_id(self, state_id: str):
        """Override the derived state identifier."""
        self._state_id = state_id
        return self

    def get_state_id(self) -> str:
        if self._state_id is None:
            self._state_id = state_id_from_label(self.state_prefix, self.label)
        return self._state_id

    def _serialize_items(self, request: Optional[Any], visible_only: bool) -> List[Dict[str, Any]]:
        return [
            item.to_array(request, visible_only)
            for item in self.items
            if not visible_only or item.is_visible(request)
        ]

    def to_array(self, request: Optional[Any] = None, visible_only: bool = False) -> Dict[str, Any]:
        return {
            "label": self.label,
            "items": self._serialize_items(request, visible_only),
            "collapsible": self.is_collapsible,
            # Collapsed only applies to collapsible containers
            "collapsed": self.is_collapsible and self.is_collapsed,
            "stateId": self.get_state_id(),
            "icon": self.icon,
            "badge": self.resolve_badge(request),
            "badgeType": self.resolve_badge_type(request),
            "meta": dict(self.meta),
        }


class MenuGroup(MenuContainer):
    """A collapsible group of menu items inside a section."""

    state_prefix = "menu_group_"

    def _check_child(self, item: Any) -> None:
        if not isinstance(item, MenuItem):
            raise InvalidArgumentError(
                f"Menu groups only contain MenuItem objects, got {type(item).__name__}"
            )


class MenuSection(MenuContainer):
    """A top-level section holding items and groups, optionally linking to a path."""

    state_prefix = "menu_section_"

    def __init__(self, label: str, items: Optional[Iterable[MenuEntry]] = None):
        self.path: Optional[str] = None
        super().__init__(label, items)

    def _check_child(self, item: Any) -> None:
        if not isinstance(item, (MenuItem, MenuGroup)):
            raise InvalidArgumentError(
                f"Menu sections only contain MenuItem or MenuGroup objects, got {type(item).__name__}"
            )

    def with_path(self, path: str) -> "MenuSection":
        self.path = path
        return self

    def to_array(self, request: Optional[Any] = None, visible_only: bool = False) -> Dict[str, Any]:
        data = super().to_array(request, visible_only)
        data["path"] = self.path
        return data


class Menu:
    """Ordered top-level navigation entries built for a single request."""

    def __init__(self, items: Optional[Iterable[MenuEntry]] = None):
        self._items: List[MenuEntry] = list(items or [])

    def append(self, item: MenuEntry) -> "Menu":
        self._items.append(item)
        return self

    def prepend(self, item: MenuEntry) -> "Menu":
        self._items.insert(0, item)
        return self

    def add(self, items: Iterable[MenuEntry]) -> "Menu":
        for item in items:
            self.append(item)
        return self

    def get_items(self) -> List[MenuEntry]:
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuEntry]:
        # Iterate over a snapshot so callbacks can keep mutating the menu
        return iter(list(self._items))

    def to_array(self, request: Optional[Any] = None, visible_only: bool = False) -> List[Dict[str, Any]]:
        return [
            item.to_array(request, visible_only)
            for item in self._items
            if not visible_only or item.is_visible(request)
        ]

    serialize = to_array
