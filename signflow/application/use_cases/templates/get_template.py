"""Use cases for reading templates."""

from collections.abc import Sequence

from signflow.domain.entities import Template
from signflow.domain.exceptions import TEMPLATE_NOT_FOUND
from signflow.infrastructure.repositories import SigningRepository


def get_template(repository: SigningRepository, template_id: str) -> Template:
    """Return the template identified by ``template_id`` or raise an error."""

    template = repository.get_template(template_id)
    if template is None:
        raise ValueError(TEMPLATE_NOT_FOUND)
    return template


def list_templates(repository: SigningRepository) -> Sequence[Template]:
    """Return all templates in the order they were created."""

    return repository.list_templates()
