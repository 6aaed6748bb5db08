"""
Structured data pipeline registrar.

Registers the structured data analysis pipeline with Data Machine and answers
read-only questions about it. Pipeline execution, scheduling and storage all
belong to Data Machine; this service only assembles the definition and
delegates.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from structured_data_pipeline.config import settings
from structured_data_pipeline.models.pipeline_definition import (
    PipelineDefinition,
    get_pipeline_definition,
)
from structured_data_pipeline.models.results import (
    PipelineCreated,
    PipelineCreationFailed,
    PipelineCreationResult,
)
from structured_data_pipeline.services.option_store import OptionStore
from structured_data_pipeline.services.pipeline_store import PipelineStore

logger = logging.getLogger("structured_data_pipeline.services.pipeline_registrar")


@dataclass
class RegistrarState:
    """Ids recorded after the pipeline was created."""

    pipeline_id: Any = None
    flow_id: Any = None

    @property
    def is_registered(self) -> bool:
        return bool(self.pipeline_id) and bool(self.flow_id)

    @classmethod
    def load(cls, options: OptionStore) -> "RegistrarState":
        return cls(
            pipeline_id=options.get_option(settings.PIPELINE_ID_OPTION),
            flow_id=options.get_option(settings.FLOW_ID_OPTION),
        )

    def save(self, options: OptionStore):
        options.update_option(settings.PIPELINE_ID_OPTION, self.pipeline_id)
        options.update_option(settings.FLOW_ID_OPTION, self.flow_id)


class StructuredDataPipelineRegistrar:
    """
    Creates the structured data pipeline in Data Machine and looks up its parts.

    Duplicate creation is not prevented here: callers check pipeline_exists()
    before calling create_pipeline().
    """

    def __init__(
        self,
        store: Optional[PipelineStore],
        options: OptionStore,
        definition: Optional[PipelineDefinition] = None,
    ):
        self._store = store
        self._options = options
        self._definition = definition or get_pipeline_definition()

    @property
    def definition(self) -> PipelineDefinition:
        return self._definition

    @property
    def state(self) -> RegistrarState:
        """Current ids, read from the option store."""
        return RegistrarState.load(self._options)

    def create_pipeline(self) -> PipelineCreationResult:
        """
        Create the pipeline and record its pipeline and flow ids.

        Failures are returned, never raised. A pipeline whose flow cannot be
        found stays created in Data Machine; nothing is rolled back.

        Returns:
            PipelineCreated on success, PipelineCreationFailed otherwise
        """
        try:
            if self._store is None or not self._store.is_available():
                logger.error("Data Machine is not available, cannot create pipeline")
                return PipelineCreationFailed.dependency_missing()

            pipeline_id = self._store.create_pipeline(self._definition)
            if not pipeline_id:
                logger.error(
                    f"Data Machine did not return an id for '{self._definition.pipeline_name}'"
                )
                return PipelineCreationFailed.creation_failed()

            flows = self._store.list_flows(pipeline_id)
            flow_id = _get_field(flows[0], "flow_id") if flows else None
            if not flow_id:
                logger.error(f"Pipeline {pipeline_id} created but no flow was found")
                return PipelineCreationFailed.flow_not_found()

            self._save_state(RegistrarState(pipeline_id=pipeline_id, flow_id=flow_id))
        except Exception as e:
            logger.error(f"Failed to create pipeline: {e}")
            return PipelineCreationFailed.unexpected(e)

        logger.info(f"Created pipeline {pipeline_id} with flow {flow_id}")
        return PipelineCreated(pipeline_id=pipeline_id, flow_id=flow_id)

    def _save_state(self, state: RegistrarState):
        """Save both ids, putting the previous pair back if the save fails."""
        previous = RegistrarState.load(self._options)
        try:
            state.save(self._options)
        except Exception:
            try:
                previous.save(self._options)
            except Exception as restore_error:
                logger.warning(
                    f"Could not restore previous pipeline and flow ids: {restore_error}"
                )
            raise

    def pipeline_exists(self) -> bool:
        """Whether Data Machine already has a pipeline with this pipeline's name."""
        if self._store is None:
            return False

        name = self._definition.pipeline_name
        for pipeline in self._store.list_pipelines():
            if _get_field(pipeline, "pipeline_name") == name:
                return True
        return False

    def get_flow_step_id(self, step_type: str) -> Optional[str]:
        """
        Get the flow step id for a step type in the recorded flow.

        Args:
            step_type: Step type to find (fetch, ai, update)

        Returns:
            Flow step id, or None if the flow or the step cannot be found
        """
        flow_id = self._options.get_option(settings.FLOW_ID_OPTION)
        if not flow_id:
            return None

        if self._store is None:
            return None
        flows_service = self._store.get_flow_record_service()
        if flows_service is None:
            logger.debug("Data Machine flows service is not available")
            return None

        flow = flows_service.get_flow(flow_id)
        if not flow:
            return None
        flow_config = _get_field(flow, "flow_config")
        if not isinstance(flow_config, Mapping):
            return None

        for flow_step_id, step_config in flow_config.items():
            if _get_field(step_config, "step_type") == step_type:
                return flow_step_id
        return None


def _get_field(record: Any, field: str) -> Any:
    """Read a field from a mapping record; other values have no fields."""
    if isinstance(record, Mapping):
        return record.get(field)
    return None
