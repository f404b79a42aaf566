"""
Feature: Main menu registration
  As an admin panel developer
  I want to register a callback that builds the main navigation
  So that the sidebar reflects what the current user may see

Scenario: No main menu registered
  Given no main menu callback is registered
  When the main menu is resolved
  Then the result is None and serializes to an empty list

Scenario: Callback returns a list of entries
  Given a callback returning sections and items
  When the main menu is resolved
  Then the entries are wrapped in a Menu in the same order

Scenario: Serialize for a request
  Given entries guarded by can_see predicates
  When the main menu is serialized for a request
  Then only visible entries are included at every level
"""

import pytest
from types import SimpleNamespace
from helpers.navigation import NavigationRegistry
from models.menu import Menu, MenuGroup, MenuItem, MenuSection


@pytest.fixture(name="navigation")
def navigation_fixture():
    return NavigationRegistry()


def test_resolve_without_registration(navigation):
    # Given no main menu callback is registered
    # When the main menu is resolved
    menu = navigation.resolve_main_menu(SimpleNamespace(user=None))

    # Then the result is None and serializes to an empty list
    assert menu is None
    assert navigation.has_custom_main_menu() is False
    assert navigation.serialize_menu(menu) == []


def test_callback_list_is_wrapped_in_menu(navigation):
    # Given a callback returning sections and items
    navigation.main_menu(lambda request: [
        MenuSection.make("Dashboard").with_path("/admin/dashboard"),
        MenuItem.make("Help", "/help"),
    ])

    # When the main menu is resolved
    menu = navigation.resolve_main_menu(SimpleNamespace(user=None))

    # Then the entries are wrapped in a Menu in the same order
    assert isinstance(menu, Menu)
    assert [entry.label for entry in menu] == ["Dashboard", "Help"]


def test_callback_may_return_menu(navigation):
    built = Menu([MenuItem.make("Home", "/")])
    navigation.main_menu(lambda request: built)

    assert navigation.resolve_main_menu(None) is built


def test_callback_returning_none_gives_empty_menu(navigation):
    navigation.main_menu(lambda request: None)

    menu = navigation.resolve_main_menu(None)

    assert menu.is_empty() is True


def test_clear_main_menu(navigation):
    navigation.main_menu(lambda request: [])
    assert navigation.has_custom_main_menu() is True

    navigation.clear_main_menu()

    assert navigation.has_custom_main_menu() is False
    assert navigation.resolve_main_menu(None) is None


def test_serialize_filters_by_visibility(navigation):
    # Given entries guarded by can_see predicates
    is_admin = lambda request: request.user is not None and request.user.is_admin
    navigation.main_menu(lambda request: [
        MenuSection.make("Dashboard").with_path("/dashboard"),
        MenuSection.make("System Administration", [
            MenuItem.make("System Settings", "/admin/settings"),
            MenuGroup.make("Advanced Tools", [
                MenuItem.make("Database Console", "/admin/database"),
            ]).can_see(is_admin),
        ]),
        MenuSection.make("Billing", [MenuItem.make("Invoices", "/invoices")]).can_see(is_admin),
    ])
    member = SimpleNamespace(user=SimpleNamespace(is_admin=False))
    admin = SimpleNamespace(user=SimpleNamespace(is_admin=True))

    # When the main menu is serialized for a request
    member_data = navigation.serialize_menu(navigation.resolve_main_menu(member), member)
    admin_data = navigation.serialize_menu(navigation.resolve_main_menu(admin), admin)

    # Then only visible entries are included at every level
    assert [entry["label"] for entry in member_data] == ["Dashboard", "System Administration"]
    assert [entry["label"] for entry in member_data[1]["items"]] == ["System Settings"]
    assert [entry["label"] for entry in admin_data] == ["Dashboard", "System Administration", "Billing"]
    assert [entry["label"] for entry in admin_data[1]["items"]] == ["System Settings", "Advanced Tools"]


def test_serialize_resolves_badges_per_request(navigation):
    counter = {"calls": 0}

    def pending_orders(request):
        counter["calls"] += 1
        return request.pending

    navigation.main_menu(lambda request: [
        MenuItem.make("Orders", "/orders").with_badge(pending_orders, "warning"),
    ])

    first = SimpleNamespace(pending=2)
    second = SimpleNamespace(pending=5)

    assert navigation.serialize_menu(navigation.resolve_main_menu(first), first)[0]["badge"] == 2
    assert navigation.serialize_menu(navigation.resolve_main_menu(second), second)[0]["badge"] == 5
    assert counter["calls"] == 2
