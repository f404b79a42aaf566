from helpers.navigation import NavigationRegistry


# Global registry instance
registry = NavigationRegistry()


def get_navigation():
    return registry
