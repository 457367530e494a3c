"""Async client for the thread and message resources of the Assistants API."""

from . import threads
from .api import set_key
from .errors import ApiError, SchemaError, ThreadsClientError, TransportError
from .schemas import (
    Annotation,
    Content,
    DeletedThread,
    FileCitation,
    FileCitationAnnotation,
    FilePath,
    FilePathAnnotation,
    ImageFile,
    ImageFileContent,
    IncompleteDetails,
    Message,
    MessageObject,
    Role,
    Text,
    TextContent,
    Thread,
)

__all__ = [
    "threads",
    "set_key",
    "ApiError",
    "SchemaError",
    "ThreadsClientError",
    "TransportError",
    "Annotation",
    "Content",
    "DeletedThread",
    "FileCitation",
    "FileCitationAnnotation",
    "FilePath",
    "FilePathAnnotation",
    "ImageFile",
    "ImageFileContent",
    "IncompleteDetails",
    "Message",
    "MessageObject",
    "Role",
    "Text",
    "TextContent",
    "Thread",
]
