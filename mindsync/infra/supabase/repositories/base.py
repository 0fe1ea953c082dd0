"""Base repository with common CRUD operations"""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any
from pydantic import BaseModel
from supabase import Client

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Common CRUD over one MindSync table.
    Rows belong to a user, so lookups and writes can be scoped through ``user_id``.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        return self._model_class(**data)

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of database dicts to domain models"""
        return [self._to_model(item) for item in data]

    def _table(self):
        return self._client.table(self._table_name)

    async def find_by_id(self, id: str, user_id: Optional[str] = None) -> Optional[T]:
        """Find a single record by ID"""
        query = self._table().select("*").eq("id", id)
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
        order_by: Optional[str] = None,
        desc: bool = False,
    ) -> List[T]:
        """Find records matching filters"""
        query = self._table().select("*")

        for key, value in filters.items():
            query = query.eq(key, value)

        if order_by:
            query = query.order(order_by, desc=desc)

        if limit:
            query = query.limit(limit)

        response = query.execute()
        return self._to_models(response.data)

    async def create(self, data: CreateT) -> T:
        """Create a new record"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')
        response = self._table().insert(data_dict).execute()

        if not response.data:
            raise ValueError("Failed to create record")

        return self._to_model(response.data[0])

    async def update(self, id: str, data: UpdateT, user_id: Optional[str] = None) -> Optional[T]:
        """Update a record by ID"""
        data_dict = data.model_dump(exclude_unset=True, mode='json')

        if not data_dict:
            # No fields to update
            return await self.find_by_id(id, user_id=user_id)

        query = self._table().update(data_dict).eq("id", id)
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def delete(self, id: str, user_id: Optional[str] = None) -> bool:
        """Delete a record by ID"""
        query = self._table().delete().eq("id", id)
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.execute()
        return len(response.data) > 0
