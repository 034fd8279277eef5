from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session

# Type générique pour le modèle (Task, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)


class StoreError(Exception):
    """Échec de la couche de persistance (SQL, connexion, contrainte...)."""


class NotFoundError(StoreError, LookupError):
    pass


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Toute erreur SQLAlchemy est annulée (rollback) puis relevée en StoreError.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f"{action} failed: {exc}") from exc

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        with self._guard(f"get {self.model.__name__}"):
            return self.session.get(self.model, id_)

    def get_or_raise(self, id_: Any) -> ModelT:
        entity = self.get(id_)
        if entity is None:
            raise NotFoundError(f"{self.model.__name__} {id_} not found")
        return entity

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (id/valeurs par défaut remplis au refresh)."""
        with self._guard(f"create {self.model.__name__}"):
            entity = self.model(**fields)
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
            return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        """Met à jour un enregistrement existant, uniquement sur les champs fournis."""
        with self._guard(f"update {self.model.__name__}"):
            for key, value in changes.items():
                setattr(entity, key, value)
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
            return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        with self._guard(f"delete {self.model.__name__}"):
            self.session.delete(entity)
            self.session.commit()
