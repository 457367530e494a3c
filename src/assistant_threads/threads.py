"""Thread and message operations of the Assistants API.

Each function performs exactly one request; nothing is retried or cached.
"""

from __future__ import annotations

import logging
from typing import Any

from .api import api_delete, api_get, api_post
from .schemas import (
    CreateMessageRequest,
    CreateThreadRequest,
    DeletedThread,
    Message,
    MessageObject,
    Role,
    Thread,
    UpdateThreadRequest,
    dump_model,
)

logger = logging.getLogger(__name__)


async def create(
    messages: list[Message],
    metadata: dict[str, str] | None = None,
) -> Thread:
    """
    Create a new thread, optionally seeded with messages.

    Args:
        messages: Messages to start the thread with
        metadata: Key/value pairs stored on the thread

    Returns:
        The created thread, with its server-assigned id
    """
    request = CreateThreadRequest(messages=messages, metadata=metadata or {})
    thread = await api_post("threads", dump_model(request), Thread)
    logger.info(f"Created thread {thread.id} with {len(messages)} messages")
    return thread


async def fetch(thread_id: str) -> Thread:
    """Retrieve a thread by id."""
    return await api_get(f"threads/{thread_id}", Thread)


async def update(thread_id: str, metadata: dict[str, Any]) -> Thread:
    """Replace the metadata of a thread. Its messages are left untouched."""
    request = UpdateThreadRequest(metadata=metadata)
    return await api_post(f"threads/{thread_id}", dump_model(request), Thread)


async def delete(thread_id: str) -> DeletedThread:
    """Delete a thread. This cannot be undone."""
    deleted = await api_delete(f"threads/{thread_id}", DeletedThread)
    logger.info(f"Deleted thread {thread_id} (deleted={deleted.deleted})")
    return deleted


async def create_message(
    thread_id: str,
    role: Role,
    content: str,
    file_ids: list[str] | None = None,
    metadata: dict[str, str] | None = None,
) -> MessageObject:
    """
    Append a message to an existing thread.

    The attachment limit on ``file_ids`` is enforced by the service, which
    answers with an ApiError when it is exceeded.

    Args:
        thread_id: Thread to append to
        role: Author of the message
        content: Message text
        file_ids: Files the message should reference
        metadata: Key/value pairs stored on the message

    Returns:
        The persisted message
    """
    request = CreateMessageRequest(
        role=role,
        content=content,
        file_ids=file_ids,
        metadata=metadata,
    )
    message = await api_post(f"threads/{thread_id}/messages", dump_model(request), MessageObject)
    logger.debug(f"Created message {message.id} in thread {thread_id}")
    return message
