"""Utility script to store a template read from an HTML file."""

from __future__ import annotations

import argparse
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from signflow.application.use_cases.templates import save_template
from signflow.infrastructure.database import SessionLocal, initialize_database
from signflow.infrastructure.repositories import (
    SigningRepository,
    SqlAlchemyCollectionStore,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for template creation."""

    parser = argparse.ArgumentParser(
        description="Create or replace a document template for the signflow service.",
    )
    parser.add_argument("content_file", type=Path, help="HTML-Datei mit dem Vorlageninhalt")
    parser.add_argument("--name", required=True, help="Name der Vorlage")
    parser.add_argument(
        "--template-id",
        default=None,
        help="ID einer bestehenden Vorlage, die ersetzt werden soll (optional)",
    )
    return parser.parse_args()


def main() -> None:
    """Store a template using the provided command line arguments."""

    args = parse_args()

    try:
        content = args.content_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Die Datei konnte nicht gelesen werden: {exc}") from exc

    initialize_database()

    repository = SigningRepository(SqlAlchemyCollectionStore(SessionLocal))
    try:
        repository.load()
        template = save_template(
            repository,
            name=args.name,
            content=content,
            template_id=args.template_id,
        )
    except ValueError as exc:
        raise SystemExit(f"Die Vorlage konnte nicht gespeichert werden: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Fehler beim Speichern in der Datenbank: {exc}") from exc

    print(
        "Vorlage gespeichert:\n"
        f"  ID: {template.id}\n"
        f"  Name: {template.name}\n"
        f"  Felder: {', '.join(template.fields) or '-'}"
    )


if __name__ == "__main__":
    main()
