"""
Result models for pipeline creation.

``create_pipeline()`` never raises; it returns one of these tagged results.
"""

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

DEPENDENCY_MISSING_MESSAGE = "Data Machine plugin is required for this plugin to work."
CREATION_FAILED_MESSAGE = "Failed to create pipeline using Data Machine system."
FLOW_NOT_FOUND_MESSAGE = "Pipeline created but flow not found."
UNEXPECTED_FAILURE_PREFIX = "Failed to create pipeline: "
SUCCESS_MESSAGE = "Pipeline created successfully using Data Machine unified system!"


class PipelineErrorKind(str, Enum):
    """Why pipeline creation failed."""

    DEPENDENCY_MISSING = "dependency_missing"
    CREATION_FAILED = "creation_failed"
    FLOW_NOT_FOUND = "flow_not_found"
    UNEXPECTED = "unexpected"


class PipelineCreated(BaseModel):
    """Pipeline and flow were created and their ids stored."""

    success: Literal[True] = True
    message: str = SUCCESS_MESSAGE
    pipeline_id: Any = Field(..., description="Pipeline id returned by Data Machine")
    flow_id: Any = Field(..., description="Id of the pipeline's first flow")


class PipelineCreationFailed(BaseModel):
    """Pipeline creation failed; the previously stored ids are left in place."""

    success: Literal[False] = False
    error: str = Field(..., description="Human-readable error message")
    error_kind: PipelineErrorKind

    @classmethod
    def dependency_missing(cls) -> "PipelineCreationFailed":
        return cls(
            error=DEPENDENCY_MISSING_MESSAGE,
            error_kind=PipelineErrorKind.DEPENDENCY_MISSING,
        )

    @classmethod
    def creation_failed(cls) -> "PipelineCreationFailed":
        return cls(
            error=CREATION_FAILED_MESSAGE,
            error_kind=PipelineErrorKind.CREATION_FAILED,
        )

    @classmethod
    def flow_not_found(cls) -> "PipelineCreationFailed":
        return cls(
            error=FLOW_NOT_FOUND_MESSAGE,
            error_kind=PipelineErrorKind.FLOW_NOT_FOUND,
        )

    @classmethod
    def unexpected(cls, exc: Exception) -> "PipelineCreationFailed":
        return cls(
            error=f"{UNEXPECTED_FAILURE_PREFIX}{exc}",
            error_kind=PipelineErrorKind.UNEXPECTED,
        )


PipelineCreationResult = Union[PipelineCreated, PipelineCreationFailed]
