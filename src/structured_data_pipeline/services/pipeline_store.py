"""
Pipeline store interface.

The registrar talks to Data Machine only through ``PipelineStore``. The
``HookPipelineStore`` adapter implements it on top of Data Machine's named
filters.
"""

import logging
from typing import Any, Mapping, Optional, Protocol, Sequence

from structured_data_pipeline.models.pipeline_definition import PipelineDefinition
from structured_data_pipeline.services.hooks import HookRegistry, get_hook_registry

logger = logging.getLogger("structured_data_pipeline.services.pipeline_store")

CREATE_PIPELINE_HOOK = "dm_create_pipeline"
GET_PIPELINE_FLOWS_HOOK = "dm_get_pipeline_flows"
GET_PIPELINES_HOOK = "dm_get_pipelines"
DATABASE_SERVICES_HOOK = "dm_db"
FLOWS_SERVICE = "flows"


class FlowRecordService(Protocol):
    """Data Machine's flow records service."""

    def get_flow(self, flow_id: Any) -> Optional[Mapping[str, Any]]:
        """
        Fetch a flow record.

        Args:
            flow_id: Flow identifier

        Returns:
            Flow record (may carry a 'flow_config' mapping) or None
        """
        ...


class PipelineStore(Protocol):
    """
    Capabilities of Data Machine used by the registrar.

    Implementations report a missing Data Machine through is_available()
    rather than by raising.
    """

    def is_available(self) -> bool:
        """Whether Data Machine can create pipelines."""
        ...

    def create_pipeline(self, definition: PipelineDefinition) -> Any:
        """Create the pipeline and its flow; return the pipeline id or a falsy value."""
        ...

    def list_flows(self, pipeline_id: Any) -> Sequence[Mapping[str, Any]]:
        """Flows of a pipeline, in Data Machine's order."""
        ...

    def list_pipelines(self) -> Sequence[Mapping[str, Any]]:
        """All pipelines known to Data Machine."""
        ...

    def get_flow_record_service(self) -> Optional[FlowRecordService]:
        """The flow records service, or None if Data Machine does not provide one."""
        ...


def _as_records(value: Any, hook: str) -> list:
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        logger.warning(
            f"Filter '{hook}' returned {type(value).__name__}, expected a list"
        )
        return []
    return list(value)


class HookPipelineStore:
    """PipelineStore backed by Data Machine's filter hooks."""

    def __init__(self, hooks: Optional[HookRegistry] = None):
        self._hooks = hooks if hooks is not None else get_hook_registry()

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    def is_available(self) -> bool:
        return self._hooks.has_filter(CREATE_PIPELINE_HOOK)

    def create_pipeline(self, definition: PipelineDefinition) -> Any:
        return self._hooks.apply_filters(
            CREATE_PIPELINE_HOOK, None, definition.to_payload()
        )

    def list_flows(self, pipeline_id: Any) -> list:
        flows = self._hooks.apply_filters(GET_PIPELINE_FLOWS_HOOK, [], pipeline_id)
        return _as_records(flows, GET_PIPELINE_FLOWS_HOOK)

    def list_pipelines(self) -> list:
        pipelines = self._hooks.apply_filters(GET_PIPELINES_HOOK, [])
        return _as_records(pipelines, GET_PIPELINES_HOOK)

    def get_flow_record_service(self) -> Optional[FlowRecordService]:
        services = self._hooks.apply_filters(DATABASE_SERVICES_HOOK, {})
        if not isinstance(services, Mapping):
            return None
        return services.get(FLOWS_SERVICE) or None
