"""MongoDB storage of event stream resume cursors."""

from datetime import datetime, timezone
from typing import Optional

from overseer.domain.repositories.stream_cursor_repository import (
    IStreamCursorRepository,
)
from overseer.infrastructure.database import MongoDatabase


class StreamCursorRepository(IStreamCursorRepository):
    """One document per subscription holding the last consumed index."""

    COLLECTION_NAME = "stream_cursors"

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    async def get(self, subscription: str) -> Optional[int]:
        document = await self.db.find_one(
            self.COLLECTION_NAME, {"subscription": subscription}
        )
        if document is None:
            return None
        return int(document["index"])

    async def save(self, subscription: str, index: int) -> None:
        await self.db.upsert_one(
            self.COLLECTION_NAME,
            {"subscription": subscription},
            {
                "subscription": subscription,
                "index": index,
                "updated_at": datetime.now(timezone.utc),
            },
        )
