"""
Pydantic models for the Files API.
"""

from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, BeforeValidator, Field, ValidationInfo, field_validator

from apiguard.config import settings
from apiguard.models.fields import integer
from apiguard.validators.file_size import FILE_SIZE_RULE
from apiguard.validators.file_type import FILE_TYPE_RULE
from apiguard.validators.purpose import OPTIONAL_PURPOSE_RULE, PURPOSE_RULE
from apiguard.validators.rules import enforce

FilePurpose = Literal["assistants", "vision", "batch", "fine-tune", "user_data", "evals"]


class ExpiresAfter(BaseModel):
    """Expiration policy for an uploaded file."""

    anchor: Literal["created_at"]
    seconds: integer(
        ge=settings.EXPIRES_AFTER_MIN_SECONDS,
        le=settings.EXPIRES_AFTER_MAX_SECONDS,
    ) = Field(
        ...,
        description="Seconds after the anchor before the file is deleted (1 hour to 30 days)",
    )

    model_config = {"extra": "forbid"}


class CreateFileRequest(BaseModel):
    """
    Request body for a file upload.

    ``file_type`` is the uploaded file's MIME type or filename and
    ``file_size`` its size in bytes. Both are checked against ``purpose``,
    so ``purpose`` must stay declared before them.
    """

    purpose: Annotated[FilePurpose, BeforeValidator(enforce(PURPOSE_RULE))]
    expires_after: Optional[ExpiresAfter] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None

    model_config = {"extra": "forbid"}

    @field_validator("file_type", mode="before")
    @classmethod
    def validate_file_type_for_purpose(cls, file_type: Any, info: ValidationInfo) -> Any:
        """Check the file format is accepted for the declared purpose"""
        if file_type is None:
            return None
        violation = FILE_TYPE_RULE.check((file_type, info.data.get("purpose")))
        if violation is not None:
            raise violation
        return file_type

    @field_validator("file_size", mode="before")
    @classmethod
    def validate_file_size_for_purpose(cls, file_size: Any, info: ValidationInfo) -> Any:
        """Check the file fits the size limit of the declared purpose"""
        if file_size is None:
            return None
        violation = FILE_SIZE_RULE.check((file_size, info.data.get("purpose")))
        if violation is not None:
            raise violation
        return file_size


class ListFilesQuery(BaseModel):
    """Query parameters for listing files."""

    purpose: Annotated[Optional[FilePurpose], BeforeValidator(enforce(OPTIONAL_PURPOSE_RULE))] = None
    order: Literal["asc", "desc"] = "desc"
    limit: int = Field(default=20, ge=1, le=settings.LIST_FILES_MAX_LIMIT)
    after: Optional[str] = None

    model_config = {"extra": "forbid"}
