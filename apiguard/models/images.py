"""
Pydantic models for the Images API.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from apiguard.models.fields import integer


class ImageVariationRequest(BaseModel):
    """Form fields for creating variations of an image. Only dall-e-2 supports variations."""

    model: Literal["dall-e-2"] = "dall-e-2"
    n: integer(ge=1, le=10) = 1
    size: Literal["256x256", "512x512", "1024x1024"] = "1024x1024"
    response_format: Literal["url", "b64_json"] = "url"
    user: Optional[str] = None

    model_config = {"extra": "forbid"}
