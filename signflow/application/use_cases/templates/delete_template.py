"""Use case for deleting templates."""

import logging

from signflow.domain.exceptions import TEMPLATE_NOT_FOUND
from signflow.infrastructure.repositories import SigningRepository

logger = logging.getLogger(__name__)


def delete_template(repository: SigningRepository, template_id: str) -> None:
    """Remove the template; documents created from it keep their snapshot."""

    if repository.get_template(template_id) is None:
        raise ValueError(TEMPLATE_NOT_FOUND)
    repository.delete_template(template_id)
    logger.info("Deleted template %s", template_id)
