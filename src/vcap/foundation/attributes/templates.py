"""Interpolation of templated attribute values.

Templated attributes use ``str.format`` named placeholders, e.g.
``/var/vcap/deploy/rubies/ruby-{version}``. Templates are rendered at read
time, so a derived attribute always reflects the current value of the
attribute it references.

Only named placeholders are accepted. Positional fields (``{}``, ``{0}``)
and attribute or index access (``{version.major}``, ``{v[0]}``) are rejected,
as are format specs and conversions (``{version:>20}``, ``{version!r}``), so
that a placeholder is always replaced by the plain string value verbatim.
"""

from __future__ import annotations

from string import Formatter
from typing import TYPE_CHECKING

from vcap.foundation.attributes.exceptions import AttributeTemplateError

if TYPE_CHECKING:
    from collections.abc import Mapping

_FORMATTER = Formatter()


def template_fields(template: str) -> frozenset[str]:
    """Return the placeholder names referenced by a template.

    Args:
        template: A ``str.format`` style template.

    Returns:
        Set of placeholder names (empty for a literal string).

    Raises:
        AttributeTemplateError: If the template is malformed or uses a
            positional, attribute or index placeholder, or a placeholder
            with a format spec or conversion.
    """
    try:
        parsed = list(_FORMATTER.parse(template))
    except ValueError as exc:
        raise AttributeTemplateError(template, str(exc)) from exc

    fields: set[str] = set()
    for _literal, field_name, spec, conversion in parsed:
        if field_name is None:
            continue
        if not field_name.isidentifier():
            raise AttributeTemplateError(
                template,
                f"placeholder {{{field_name}}} is not a named attribute",
            )
        if conversion is not None:
            raise AttributeTemplateError(
                template,
                f"conversion !{conversion} not allowed in placeholder {{{field_name}}}",
            )
        if spec:
            raise AttributeTemplateError(
                template,
                f"format spec not allowed in placeholder {{{field_name}}}",
            )
        fields.add(field_name)
    return frozenset(fields)


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute named placeholders in a template.

    Args:
        template: A ``str.format`` style template.
        values: Placeholder name to substitution value.

    Returns:
        The rendered string.

    Raises:
        AttributeTemplateError: If the template is malformed or references
            a placeholder missing from ``values``.
    """
    missing = template_fields(template) - values.keys()
    if missing:
        raise AttributeTemplateError(
            template,
            f"no value for placeholder(s): {', '.join(sorted(missing))}",
        )
    try:
        return template.format_map(values)
    except (KeyError, IndexError, ValueError, TypeError) as exc:
        raise AttributeTemplateError(template, str(exc)) from exc


def require_placeholder(template: str, placeholder: str, allowed: frozenset[str]) -> str:
    """Validate that a template references ``placeholder`` and nothing unknown.

    Args:
        template: Template to validate.
        placeholder: Placeholder that must appear (e.g. "version").
        allowed: Every placeholder name the template may reference.

    Returns:
        The template, unchanged.

    Raises:
        AttributeTemplateError: On malformed templates, a missing required
            placeholder or an unknown placeholder.
    """
    fields = template_fields(template)
    if placeholder not in fields:
        raise AttributeTemplateError(template, f"must reference {{{placeholder}}}")
    unknown = fields - allowed
    if unknown:
        raise AttributeTemplateError(
            template,
            f"unknown placeholder(s): {', '.join(sorted(unknown))}",
        )
    return template
