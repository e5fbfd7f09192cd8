"""
VTL mapping templates for the DynamoDB resolvers.

The skeletons live in mapping-templates/ and only take typed values (the key
and name attribute names); they are rendered once at synth time and shipped
to AppSync as plain strings.
"""

from dataclasses import dataclass
from pathlib import Path
from string import Template

MAPPING_TEMPLATES_DIR = Path(__file__).parent / "mapping-templates"

GET_ITEM_REQUEST = "get_item_request.vtl"
PUT_ITEM_REQUEST = "put_item_request.vtl"
DELETE_ITEM_REQUEST = "delete_item_request.vtl"
RESULT_RESPONSE = "result_response.vtl"


class MappingTemplateSkeleton(Template):
    """``%{name}`` placeholders, since VTL already claims ``$``."""

    delimiter = "%"


@dataclass(frozen=True)
class TemplateValues:
    key_field: str
    name_field: str = "name"


def render_mapping_template(template_name: str, values: TemplateValues) -> str:
    """Fill a skeleton from MAPPING_TEMPLATES_DIR with the given values.

    Raises:
        FileNotFoundError: if no skeleton has that name
        KeyError: if the skeleton uses a placeholder with no value
    """
    skeleton = MappingTemplateSkeleton((MAPPING_TEMPLATES_DIR / template_name).read_text())
    return skeleton.substitute(key_field=values.key_field, name_field=values.name_field).strip()
