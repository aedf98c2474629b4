# Base class for HR records kept as JSON documents in a Redis hash.
# Author: NEA HR Engineering
# Date: 2025-07-02
# Version: 0.1.0

from typing import Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel

from hr_assistant.services.redis_client import get_redis

RecordT = TypeVar("RecordT", bound=BaseModel)


class RedisHashStore(Generic[RecordT]):
    """
    Stores one record type in a single Redis hash, keyed by the record's ``id``.
    Subclasses set ``hash_name`` and ``record_type``.
    """
    hash_name: str
    record_type: Type[RecordT]

    async def put(self, record: RecordT) -> RecordT:
        await get_redis().hset(self.hash_name, record.id, record.model_dump_json())
        return record

    async def get(self, record_id: str) -> Optional[RecordT]:
        raw = await get_redis().hget(self.hash_name, record_id)
        return self.record_type.model_validate_json(raw) if raw else None

    async def all(self) -> List[RecordT]:
        values = await get_redis().hvals(self.hash_name)
        return [self.record_type.model_validate_json(value) for value in values]

    async def delete(self, record_id: str) -> bool:
        return bool(await get_redis().hdel(self.hash_name, record_id))

    async def clear(self) -> None:
        await get_redis().delete(self.hash_name)
