"""Template-related use cases."""

from .delete_template import delete_template
from .document_form import DocumentForm, FormField, describe_document_form
from .get_template import get_template, list_templates
from .save_template import MISSING_TEMPLATE_DATA, save_template

__all__ = [
    "DocumentForm",
    "FormField",
    "MISSING_TEMPLATE_DATA",
    "delete_template",
    "describe_document_form",
    "get_template",
    "list_templates",
    "save_template",
]
