from varify.stylesheet.model import RuleBlock, Stylesheet, Substitution, is_custom_property
from varify.stylesheet.parser import parse_stylesheet
from varify.stylesheet.serializer import serialize_stylesheet

__all__ = [
    "parse_stylesheet",
    "serialize_stylesheet",
    "Stylesheet",
    "RuleBlock",
    "Substitution",
    "is_custom_property",
]
