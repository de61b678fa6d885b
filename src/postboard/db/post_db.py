##############################################################################
# File: post_db.py                                                           #
# Description: Database interactions for the posts table.                    #
##############################################################################

import logging
from datetime import datetime, timezone

from databases import Database

from postboard.model.post import Post, PostPayload

logger = logging.getLogger(__name__)


class PostDB:
    """
    Data access for posts.

    Each method acquires one pooled connection, runs a single statement and
    hands the connection back when the block exits, whether the statement
    succeeded or raised.
    """

    def __init__(self, database: Database):
        self._database = database

    async def create_post(self, payload: PostPayload) -> Post:
        """
        Insert a post stamped with the current UTC time.

        Args:
            payload (PostPayload): title, content and author; absent fields are stored as null.
        Returns:
            Post: the submitted fields plus created_at and the generated id.
        """
        query = """
        INSERT INTO posts (title, content, author, created_at)
        VALUES (:title, :content, :author, :created_at)
        RETURNING id
        """
        values = {
            "title": payload.title,
            "content": payload.content,
            "author": payload.author,
            "created_at": datetime.now(timezone.utc),
        }
        async with self._database.connection() as connection:
            post_id = await connection.fetch_val(query=query, values=values)
        return Post(**values, id=post_id)

    async def get_all_posts(self) -> list[dict]:
        query = "SELECT * FROM posts"
        async with self._database.connection() as connection:
            rows = await connection.fetch_all(query=query)
        return [dict(row._mapping) for row in rows]

    async def get_posts_by_id(self, post_id: int) -> list[dict]:
        """Return the post with the given id as a list of zero or one rows."""
        query = "SELECT * FROM posts WHERE id = :id"
        async with self._database.connection() as connection:
            rows = await connection.fetch_all(query=query, values={"id": post_id})
        return [dict(row._mapping) for row in rows]

    async def get_posts_by_author(self, author: str) -> list[dict]:
        query = "SELECT * FROM posts WHERE author = :author"
        async with self._database.connection() as connection:
            rows = await connection.fetch_all(query=query, values={"author": author})
        return [dict(row._mapping) for row in rows]

    async def get_posts_by_date_range(
            self, start_date: datetime, end_date: datetime
    ) -> list[dict]:
        """Return posts whose created_at falls between both bounds, inclusive."""
        logger.info("Fetching posts created between %s and %s", start_date, end_date)
        query = "SELECT * FROM posts WHERE created_at BETWEEN :start_date AND :end_date"
        values = {"start_date": start_date, "end_date": end_date}
        async with self._database.connection() as connection:
            rows = await connection.fetch_all(query=query, values=values)
        return [dict(row._mapping) for row in rows]

    async def update_post(self, post_id: int, payload: PostPayload) -> None:
        # all three columns are overwritten, absent fields included
        query = """
        UPDATE posts
        SET title = :title,
            content = :content,
            author = :author
        WHERE id = :id
        """
        values = {
            "title": payload.title,
            "content": payload.content,
            "author": payload.author,
            "id": post_id,
        }
        async with self._database.connection() as connection:
            await connection.execute(query=query, values=values)

    async def delete_post(self, post_id: int) -> None:
        query = "DELETE FROM posts WHERE id = :id"
        async with self._database.connection() as connection:
            await connection.execute(query=query, values={"id": post_id})

    async def delete_posts_by_author(self, author: str) -> None:
        query = "DELETE FROM posts WHERE author = :author"
        async with self._database.connection() as connection:
            await connection.execute(query=query, values={"author": author})
