"""
➡️ But : Définir la structure de la table des tâches (ORM).

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

id et created_at sont générés par la base/l'ORM à la création : l'API ne les fournit jamais.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str
    completed: bool = False
    created_at: Optional[datetime] = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
