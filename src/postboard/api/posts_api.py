import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from postboard.db.post_db import PostDB
from postboard.model.post import PostPayload
from postboard.utils import parse_post_id, parse_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts")

READ_ERROR_MESSAGE = "An error occurred"


def get_post_db(request: Request) -> PostDB:
    return request.app.state.post_db


async def read_post_payload(request: Request) -> PostPayload:
    try:
        body = await request.json()
    except ValueError:
        # empty, form-encoded or malformed bodies carry no fields
        body = {}
    return PostPayload.from_body(body)


def _write_error(e: Exception) -> JSONResponse:
    logger.error("Error: %s", str(e), exc_info=True)
    return JSONResponse(status_code=500, content={"error": str(e)})


def _read_error(e: Exception) -> PlainTextResponse:
    logger.error("Error: %s", str(e), exc_info=True)
    return PlainTextResponse(READ_ERROR_MESSAGE, status_code=500)


@router.post("")
async def create_post(request: Request, post_db: PostDB = Depends(get_post_db)):
    try:
        post = await post_db.create_post(await read_post_payload(request))
        logger.info("Post created successfully with id %s", post.id)
        return {"status": "success", "data": post, "message": "Post created successfully"}
    except Exception as e:
        return _write_error(e)


@router.get("")
async def get_posts(post_db: PostDB = Depends(get_post_db)):
    try:
        return await post_db.get_all_posts()
    except Exception as e:
        return _read_error(e)


@router.get("/author/{author_name}")
async def get_posts_by_author(author_name: str, post_db: PostDB = Depends(get_post_db)):
    try:
        return await post_db.get_posts_by_author(author_name)
    except Exception as e:
        return _read_error(e)


@router.get("/dates/{start_date}/{end_date}")
async def get_posts_by_date_range(
        start_date: str,
        end_date: str,
        post_db: PostDB = Depends(get_post_db),
):
    """
    Posts created between the two path dates, both bounds inclusive.

    Dates are ISO-8601 (`2024-01-31` or `2024-01-31T12:00:00+00:00`); values
    without an offset are read as UTC. Other spellings (`Jan 31 2024`) get the
    500 read error.
    """
    try:
        return await post_db.get_posts_by_date_range(
            parse_timestamp(start_date), parse_timestamp(end_date)
        )
    except Exception as e:
        return _read_error(e)


@router.get("/{post_id}")
async def get_post(post_id: str, post_db: PostDB = Depends(get_post_db)):
    try:
        return await post_db.get_posts_by_id(parse_post_id(post_id))
    except Exception as e:
        return _read_error(e)


@router.put("/{post_id}")
async def update_post(
        post_id: str,
        request: Request,
        post_db: PostDB = Depends(get_post_db),
):
    # No existence check: a missing id still reports success.
    try:
        payload = await read_post_payload(request)
        await post_db.update_post(parse_post_id(post_id), payload)
        logger.info("Post %s updated", post_id)
        return {"status": "success", "message": "Post updated successfully"}
    except Exception as e:
        return _write_error(e)


@router.delete("/author/{author_name}")
async def delete_posts_by_author(author_name: str, post_db: PostDB = Depends(get_post_db)):
    try:
        await post_db.delete_posts_by_author(author_name)
        logger.info("Posts by author %s deleted", author_name)
        return {"status": "success", "message": f"Post {author_name} deleted successfully"}
    except Exception as e:
        return _write_error(e)


@router.delete("/{post_id}")
async def delete_post(post_id: str, post_db: PostDB = Depends(get_post_db)):
    try:
        await post_db.delete_post(parse_post_id(post_id))
        logger.info("Post %s deleted", post_id)
        return {"status": "success", "message": f"Post {post_id} deleted successfully"}
    except Exception as e:
        return _write_error(e)
