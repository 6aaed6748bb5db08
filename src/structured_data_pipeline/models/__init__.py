"""
Models package for the structured data pipeline.

Pydantic models for the static pipeline definition and for creation results.
"""

from .pipeline_definition import (
    FlowConfig,
    PipelineDefinition,
    PipelineDefinitionError,
    PipelineStep,
    SchedulingConfig,
    get_pipeline_definition,
    load_pipeline_definition,
)
from .results import (
    PipelineCreated,
    PipelineCreationFailed,
    PipelineCreationResult,
    PipelineErrorKind,
)

__all__ = [
    "FlowConfig",
    "PipelineDefinition",
    "PipelineDefinitionError",
    "PipelineStep",
    "SchedulingConfig",
    "get_pipeline_definition",
    "load_pipeline_definition",
    "PipelineCreated",
    "PipelineCreationFailed",
    "PipelineCreationResult",
    "PipelineErrorKind",
]
