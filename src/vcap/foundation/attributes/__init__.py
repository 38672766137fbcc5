"""vcap Foundation Attributes -- cookbook attribute primitives.

Key registry base, precedence levels with layered resolution, template
interpolation and the attribute error hierarchy shared by all cookbooks.
"""

from vcap.foundation.attributes.exceptions import (
    AttributeTemplateError,
    AttributeValidationError,
    CookbookAttributeError,
    UnknownAttributeError,
)
from vcap.foundation.attributes.keys import AttributeKey, nest, split_key
from vcap.foundation.attributes.precedence import (
    AttributeLayers,
    Precedence,
    ResolvedAttribute,
)
from vcap.foundation.attributes.templates import (
    render_template,
    require_placeholder,
    template_fields,
)

__all__ = [
    "AttributeKey",
    "AttributeLayers",
    "AttributeTemplateError",
    "AttributeValidationError",
    "CookbookAttributeError",
    "Precedence",
    "ResolvedAttribute",
    "UnknownAttributeError",
    "nest",
    "render_template",
    "require_placeholder",
    "split_key",
    "template_fields",
]
