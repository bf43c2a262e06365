from legacy_logical.stylesheet.errors import ParseError
from legacy_logical.stylesheet.model import Stylesheet, StyleRule
from legacy_logical.stylesheet.names import to_camel_case, to_kebab_case
from legacy_logical.stylesheet.parser import load_stylesheet_json, parse_stylesheet
from legacy_logical.stylesheet.serializer import (
    serialize_rule,
    serialize_stylesheet,
    stylesheet_to_dict,
)

__all__ = [
    "ParseError",
    "Stylesheet",
    "StyleRule",
    "parse_stylesheet",
    "load_stylesheet_json",
    "serialize_rule",
    "serialize_stylesheet",
    "stylesheet_to_dict",
    "to_camel_case",
    "to_kebab_case",
]
