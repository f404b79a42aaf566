import inspect
import re
import unicodedata
from typing import Any, Callable, Optional


def state_id_from_label(prefix: str, label: str) -> str:
    """
    Build a stable state identifier from a container label.

    Accented characters are reduced to their base letters, everything outside
    [a-z0-9] collapses to a single underscore, and the result is prefixed
    with the container tag, e.g. "Tëst Ünïcödé" -> "menu_section_test_unicode".
    """
    decomposed = unicodedata.normalize("NFKD", label)
    ascii_label = "".join(char for char in decomposed if not unicodedata.combining(char))
    slug = re.sub(r"[^a-z0-9]+", "_", ascii_label.lower()).strip("_")
    return f"{prefix}{slug}"


def snake_case(name: str) -> str:
    """Convert a CamelCase class name to snake_case."""
    name = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def kebab_case(name: str) -> str:
    return snake_case(name).replace("_", "-")


def headline(name: str) -> str:
    """Split a CamelCase name into capitalized words, e.g. "MostValuableUsers" -> "Most Valuable Users"."""
    return " ".join(word.capitalize() for word in snake_case(name).split("_") if word)


def pluralize(word: str) -> str:
    """Naive English plural for resource names."""
    if not word:
        return word
    if word.endswith("y") and len(word) > 1 and word[-2].lower() not in "aeiou":
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def strip_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix) and name != suffix:
        return name[:-len(suffix)]
    return name


def call_with_request(callback: Callable[..., Any], request: Optional[Any] = None) -> Any:
    """
    Invoke a badge supplier or visibility predicate.

    Callbacks that accept a positional argument receive the request,
    zero-argument callbacks are called bare.
    """
    try:
        parameters = inspect.signature(callback).parameters.values()
    except (TypeError, ValueError):
        return callback(request)

    for parameter in parameters:
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            return callback(request)

    return callback()
