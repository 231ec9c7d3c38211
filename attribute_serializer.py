"""
Attribute serialization for iframe-like elements
"""
import json
from typing import Any, Mapping

from jinja2.utils import htmlsafe_json_dumps
from markupsafe import escape


class AttributeSerializer:
    """Renders attribute maps as HTML attribute syntax"""

    @staticmethod
    def serialize(attributes: Mapping[str, Any]) -> str:
        """
        Render attributes as key="value" pairs

        Args:
            attributes: attribute values in output order. None and False
                entries are left out, True renders as "true".

        Returns:
            Space separated pairs with HTML-escaped values
        """
        pairs = []
        for key, value in attributes.items():
            if value is None or value is False:
                continue
            if value is True:
                value = "true"
            pairs.append(f'{escape(key)}="{escape(value)}"')

        return " ".join(pairs)

    @staticmethod
    def serialize_json(attributes: Mapping[str, Any]) -> str:
        """
        Encode attributes as JSON that is safe inside a single-quoted attribute

        <, >, & and ' become \\u escapes, slashes are left as they are.

        Raises:
            TypeError, ValueError: if the values are not JSON serializable
        """
        return str(htmlsafe_json_dumps(
            dict(attributes),
            dumps=json.dumps,
            separators=(",", ":"),
            allow_nan=False,
        ))
