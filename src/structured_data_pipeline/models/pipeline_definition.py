"""
Pydantic models for the structured data analysis pipeline definition.

The definition is static: it is read from the packaged ``config/pipeline.yml``,
validated here and handed to Data Machine as a plain dictionary. It is never
persisted by this package.
"""

import logging
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from structured_data_pipeline.config import settings

logger = logging.getLogger("structured_data_pipeline.models.pipeline_definition")

StepType = Literal["fetch", "ai", "update"]


class PipelineDefinitionError(ValueError):
    """Raised when the pipeline definition file cannot be read or is invalid."""

    pass


class PipelineStep(BaseModel):
    """A single step of the pipeline with its handler-specific settings."""

    model_config = ConfigDict(extra="forbid")

    step_type: StepType = Field(description="Step type: fetch, ai or update")
    execution_order: int = Field(ge=0, description="Position of the step in the pipeline")
    label: str = Field(description="Human-readable step label")

    # Fetch and update steps
    handler: Optional[str] = Field(None, description="Data Machine handler slug")
    handler_config: Optional[Dict[str, Any]] = Field(
        None, description="Settings passed to the handler"
    )

    # AI steps
    provider: Optional[str] = Field(None, description="AI provider (e.g., 'openai')")
    model: Optional[str] = Field(None, description="Model used by the AI provider")
    system_prompt: Optional[str] = Field(
        None, description="System prompt for the AI analysis"
    )


class SchedulingConfig(BaseModel):
    """Scheduling settings of the flow Data Machine creates for the pipeline."""

    interval: str = Field("manual", description="Run interval ('manual' = on demand)")


class FlowConfig(BaseModel):
    """Flow settings sent along with the pipeline."""

    flow_name: str = Field(description="Name of the flow")
    scheduling_config: SchedulingConfig = Field(default_factory=SchedulingConfig)


class PipelineDefinition(BaseModel):
    """The complete pipeline handed to Data Machine's creation extension point."""

    pipeline_name: str = Field(description="Name used to recognise the pipeline")
    steps: List[PipelineStep] = Field(min_length=1)
    flow_config: FlowConfig

    @field_validator("steps")
    @classmethod
    def order_steps(cls, steps: List[PipelineStep]) -> List[PipelineStep]:
        orders = [step.execution_order for step in steps]
        if len(orders) != len(set(orders)):
            raise ValueError(f"Duplicate execution_order in steps: {orders}")
        return sorted(steps, key=lambda step: step.execution_order)

    def get_step(self, step_type: str) -> Optional[PipelineStep]:
        """Return the first step of the given type, or None."""
        for step in self.steps:
            if step.step_type == step_type:
                return step
        return None

    def to_payload(self) -> Dict[str, Any]:
        """Plain dictionary form expected by Data Machine (unset fields omitted)."""
        return self.model_dump(exclude_none=True)


def load_pipeline_definition(path: Optional[str] = None) -> PipelineDefinition:
    """
    Load and validate a pipeline definition from YAML.

    Args:
        path: Path to the YAML file, defaults to settings.SPEC_PATH

    Returns:
        Validated PipelineDefinition

    Raises:
        PipelineDefinitionError: If the file is missing, unparsable or invalid
    """
    spec_path = path or settings.SPEC_PATH
    try:
        with open(spec_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise PipelineDefinitionError(
            f"Cannot read pipeline definition {spec_path}: {e}"
        ) from e
    except yaml.YAMLError as e:
        raise PipelineDefinitionError(
            f"Invalid YAML in pipeline definition {spec_path}: {e}"
        ) from e

    if not isinstance(raw, dict):
        raise PipelineDefinitionError(
            f"Pipeline definition {spec_path} must be a mapping"
        )

    try:
        definition = PipelineDefinition.model_validate(raw)
    except ValidationError as e:
        raise PipelineDefinitionError(
            f"Invalid pipeline definition {spec_path}: {e}"
        ) from e

    logger.debug(
        f"Loaded pipeline definition '{definition.pipeline_name}' "
        f"with {len(definition.steps)} steps from {spec_path}"
    )
    return definition


# Singleton instance
_pipeline_definition: Optional[PipelineDefinition] = None


def get_pipeline_definition() -> PipelineDefinition:
    """Get the cached default pipeline definition."""
    global _pipeline_definition
    if _pipeline_definition is None:
        _pipeline_definition = load_pipeline_definition()
    return _pipeline_definition
