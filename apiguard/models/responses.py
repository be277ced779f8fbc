"""
Pydantic models for the Responses API (text and image generation).
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    StrictBool,
    StrictFloat,
    model_validator,
)

from apiguard.models.fields import integer
from apiguard.validators.metadata import METADATA_RULE
from apiguard.validators.prompt import PROMPT_RULE
from apiguard.validators.rules import RuleViolation, enforce
from apiguard.validators.tools import enforce_tools

Modality = Literal["text", "audio"]

IncludeOption = Literal[
    "file_search_call.results",
    "web_search_call.results",
    "web_search_call.action.sources",
    "message.input_image.image_url",
    "computer_call_output.output.image_url",
    "code_interpreter_call.outputs",
    "reasoning.encrypted_content",
    "message.output_text.logprobs",
]

# Hosted tool configurations; file_search and code_interpreter entries are checked
ToolList = Annotated[List[Dict[str, Any]], AfterValidator(enforce_tools)]

Metadata = Annotated[Optional[Dict[str, Any]], BeforeValidator(enforce(METADATA_RULE))]

PromptReference = Annotated[Optional[Dict[str, Any]], BeforeValidator(enforce(PROMPT_RULE))]


class ResponseRequestBase(BaseModel):
    """Fields shared by every Responses API request."""

    model: str = "gpt-5"
    input: str
    instructions: Optional[str] = None
    modalities: Optional[List[Modality]] = Field(default=None, min_length=1)
    tools: Optional[ToolList] = None
    conversation: Optional[Union[str, Dict[str, Any]]] = None
    previous_response_id: Optional[str] = None
    store: Optional[StrictBool] = None
    max_output_tokens: Optional[integer(ge=1)] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[StrictBool] = None
    prompt_cache_key: Optional[str] = None
    service_tier: Optional[Literal["auto", "default", "flex", "scale", "priority"]] = None
    background: Optional[StrictBool] = None
    truncation: Optional[Literal["auto", "disabled"]] = None
    safety_identifier: Optional[str] = None
    metadata: Metadata = None
    prompt: PromptReference = None
    include: Optional[List[IncludeOption]] = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_conversation_and_previous_response(self):
        """A response continues either a conversation or a previous response, not both"""
        if self.conversation is not None and self.previous_response_id is not None:
            raise RuleViolation(
                "Cannot provide both 'conversation' and 'previous_response_id' parameters",
                category="cross_field_inconsistency",
            )
        return self


class CreateTextResponseRequest(ResponseRequestBase):
    """Request body for a text response."""

    stream: StrictBool = False
    text: Optional[Dict[str, Any]] = None
    temperature: Optional[StrictFloat] = Field(default=None, ge=0, le=2)
    top_p: Optional[StrictFloat] = Field(default=None, ge=0, le=1)
    stream_options: Optional[Dict[str, Any]] = None
    reasoning: Optional[Dict[str, Any]] = None


class CreateImageResponseRequest(ResponseRequestBase):
    """Request body for a response that generates images."""

    image_model: Optional[Literal["gpt-image-1", "gpt-image-1-mini"]] = None
    image_quality: Optional[Literal["low", "medium", "high", "auto"]] = None
    image_format: Optional[Literal["png", "webp", "jpeg"]] = None
    image_size: Optional[Literal["1024x1024", "1024x1536", "1536x1024", "auto"]] = None
    image_moderation: Optional[Literal["auto", "low"]] = None
    image_background: Optional[Literal["transparent", "opaque", "auto"]] = None
    input_fidelity: Optional[Literal["high", "low"]] = None
    output_compression: Optional[integer(ge=0, le=100)] = None
    partial_images: Optional[integer(ge=0, le=3)] = None
