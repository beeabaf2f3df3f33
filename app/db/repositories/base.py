from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select
from sqlalchemy.exc import SQLAlchemyError

# Type générique pour le modèle (User, Todo)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Chaque écriture = une transaction : commit, ou rollback si le store échoue.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- TRANSACTION ----------

    def _commit(self, entity: Optional[ModelT] = None) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        if entity is not None:
            self.session.refresh(entity)

    # ---------- READ ----------

    def list_all(self) -> Sequence[ModelT]:
        """Retourne tous les enregistrements, dans l'ordre du store (pas de pagination)."""
        return self.session.exec(select(self.model)).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement."""
        entity = self.model(**fields)
        self.session.add(entity)
        self._commit(entity)
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        """Met à jour un enregistrement existant (seulement les champs fournis)."""
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        self._commit(entity)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)
        self._commit()
