from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union


class MenuItemResponse(BaseModel):
    """Schema for a navigable menu item."""
    label: str = Field(..., description="Display label")
    url: Optional[str] = Field(default=None, description="Target URL")
    icon: Optional[str] = Field(default=None, description="Icon identifier")
    badge: Optional[Any] = Field(default=None, description="Resolved badge value")
    badge_type: Optional[str] = Field(default=None, alias="badgeType", description="Badge style")
    meta: Dict[str, Any] = Field(default_factory=dict, description="Arbitrary item metadata")

    model_config = ConfigDict(populate_by_name=True)


class MenuContainerResponse(BaseModel):
    """Schema for a menu section or group with its children."""
    label: str = Field(..., description="Display label")
    items: List[Union["MenuContainerResponse", MenuItemResponse]] = Field(..., description="Child entries in order")
    collapsible: bool = Field(..., description="Whether the container can be toggled")
    collapsed: bool = Field(..., description="Current toggle state, false unless collapsible")
    state_id: str = Field(..., alias="stateId", description="Key used to persist the toggle state")
    icon: Optional[str] = Field(default=None, description="Icon identifier")
    badge: Optional[Any] = Field(default=None, description="Resolved badge value")
    badge_type: Optional[str] = Field(default=None, alias="badgeType", description="Badge style")
    meta: Dict[str, Any] = Field(default_factory=dict, description="Arbitrary container metadata")
    path: Optional[str] = Field(default=None, description="Direct link (sections only)")

    model_config = ConfigDict(populate_by_name=True)


MenuNodeResponse = Union[MenuContainerResponse, MenuItemResponse]

MenuContainerResponse.model_rebuild()


class MainMenuResponse(BaseModel):
    """Schema for the resolved main navigation."""
    items: List[MenuNodeResponse]
    total_count: int


class UserMenuResponse(BaseModel):
    """Schema for the resolved user (account) menu."""
    items: List[MenuItemResponse]
    total_count: int
    is_custom: bool = Field(..., description="Whether a user menu callback is registered")
