from typing import Generic, TypeVar, Type, Optional, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import select
from pydantic import BaseModel
from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic CRUD class for tenant-owned records.

    Reads and deletes match on the record id and tenant_id together, so a
    record owned by another tenant is indistinguishable from a missing one.
    The tenant id always comes from the caller; it is never taken from a
    request body.

    Type Parameters:
        ModelType: SQLAlchemy model with a tenant_id column
        CreateSchemaType: Pydantic schema used by subclasses to create rows
        UpdateSchemaType: Pydantic schema for partial updates
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: int, tenant_id: int) -> Optional[ModelType]:
        """
        Fetch one record of a tenant.

        Returns:
            Model instance, or None when it is missing or owned by another tenant
        """
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.tenant_id == tenant_id
        )
        return db.execute(stmt).scalar_one_or_none()

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | Dict[str, Any]
    ) -> ModelType:
        """
        Write the fields present in obj_in onto db_obj.

        db_obj must come from get(), which has already checked ownership.
        """
        if isinstance(obj_in, dict):
            changes = obj_in
        else:
            changes = obj_in.model_dump(exclude_unset=True)

        for name, value in changes.items():
            setattr(db_obj, name, value)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: int, tenant_id: int) -> Optional[ModelType]:
        """
        Delete one record of a tenant.

        Returns:
            The deleted instance, or None when nothing matched
        """
        obj = self.get(db=db, id=id, tenant_id=tenant_id)
        if obj:
            db.delete(obj)
            db.commit()
        return obj
