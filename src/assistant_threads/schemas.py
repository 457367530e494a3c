"""Wire models for threads, messages and their content.

Every model mirrors a JSON shape returned or accepted by the Assistants API.
Content and annotations are tagged unions: the ``type`` field selects exactly
one variant, and an unknown tag is rejected rather than defaulted.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from .errors import SchemaError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Role(str, Enum):
    """Author of a message."""
    OWNER = "owner"
    ASSISTANT = "assistant"

    def as_str(self) -> str:
        return self.value


# Threads

class Thread(BaseModel):
    """A conversation container persisted by the service."""

    id: str
    object: str
    created: int = Field(validation_alias=AliasChoices("created", "created_at"))
    metadata: Any = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_default(cls, value: Any) -> Any:
        return {} if value is None else value


class DeletedThread(BaseModel):
    id: str
    object: str
    deleted: bool


class Message(BaseModel):
    """A message submitted while creating a thread."""

    role: Role
    content: str
    # The service accepts at most 10 file ids per message.
    file_ids: list[str] | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_default(cls, value: Any) -> Any:
        return {} if value is None else value


# Annotations

class FileCitation(BaseModel):
    file_id: str
    quote: str


class FilePath(BaseModel):
    file_id: str


class FileCitationAnnotation(BaseModel):
    """Citation pointing at a quote inside an uploaded file."""

    type: Literal["file_citation"] = "file_citation"
    text: str
    file_citation: FileCitation
    start_index: int
    end_index: int


class FilePathAnnotation(BaseModel):
    """Reference to a file generated by a tool."""

    type: Literal["file_path"] = "file_path"
    text: str
    file_path: FilePath
    start_index: int
    end_index: int


Annotation = Annotated[
    Union[FileCitationAnnotation, FilePathAnnotation],
    Field(discriminator="type"),
]


# Content

class Text(BaseModel):
    value: str
    annotations: list[Annotation] = Field(default_factory=list)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: Text


class ImageFile(BaseModel):
    file_id: str


class ImageFileContent(BaseModel):
    type: Literal["image_file"] = "image_file"
    image_file: ImageFile


Content = Annotated[
    Union[TextContent, ImageFileContent],
    Field(discriminator="type"),
]


class IncompleteDetails(BaseModel):
    reason: str


class MessageObject(BaseModel):
    """A message as persisted by the service."""

    id: str
    object: str
    created: int = Field(validation_alias=AliasChoices("created", "created_at"))
    thread_id: str
    status: str
    incomplete_details: IncompleteDetails | None = None
    role: Role
    content: list[Content]
    file_ids: list[str] | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("content", mode="before")
    @classmethod
    def _wrap_single_content(cls, value: Any) -> Any:
        # Older payloads carry one content object instead of a list.
        if isinstance(value, dict):
            return [value]
        return value

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_default(cls, value: Any) -> Any:
        return {} if value is None else value


# Request bodies

class CreateThreadRequest(BaseModel):
    messages: list[Message] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)


class UpdateThreadRequest(BaseModel):
    metadata: dict[str, Any]


class CreateMessageRequest(BaseModel):
    role: Role
    content: str
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    """
    Validate decoded JSON into ``model``.

    Raises:
        SchemaError: if the payload does not match the model, including an
            unknown ``type`` tag or role
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.debug(f"Failed to decode {model.__name__}: {exc}")
        raise SchemaError(
            f"Invalid {model.__name__} payload ({exc.error_count()} errors): {exc}",
            cause=exc,
        ) from exc


def dump_model(instance: BaseModel) -> dict[str, Any]:
    """Dump a model to JSON-ready data, leaving out fields that are ``None``."""
    return instance.model_dump(mode="json", exclude_none=True)
