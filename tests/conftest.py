import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add the src directory to the Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from structured_data_pipeline.models.pipeline_definition import (  # noqa: E402
    load_pipeline_definition,
)
from structured_data_pipeline.services.hooks import HookRegistry  # noqa: E402
from structured_data_pipeline.services.option_store import (  # noqa: E402
    InMemoryOptionStore,
)
from structured_data_pipeline.services.pipeline_store import (  # noqa: E402
    HookPipelineStore,
)


@pytest.fixture
def pipeline_definition():
    """The packaged pipeline definition."""
    return load_pipeline_definition()


@pytest.fixture
def hooks():
    """An empty hook registry (Data Machine not installed)."""
    return HookRegistry()


@pytest.fixture
def options():
    """In-memory option store."""
    return InMemoryOptionStore()


@pytest.fixture
def hook_store(hooks):
    """Pipeline store backed by the test hook registry."""
    return HookPipelineStore(hooks)


@pytest.fixture
def sample_flow_record():
    """Flow record as returned by Data Machine's flows service."""
    return {
        "flow_id": "f1",
        "flow_name": "Structured Data Analysis Flow",
        "flow_config": {
            "step_fetch_f1": {"step_type": "fetch", "handler": "wordpress_posts"},
            "step_ai_f1": {"step_type": "ai", "model": "gpt-5-mini"},
            "step_update_f1": {"step_type": "update", "handler": "structured_data"},
        },
    }


@pytest.fixture
def data_machine(hooks, sample_flow_record):
    """
    Register Data Machine's filters on the test hook registry.

    Returns a namespace of mocks so tests can inspect and reconfigure calls.
    """
    dm = MagicMock()
    dm.create_pipeline.return_value = 42
    dm.get_pipeline_flows.return_value = [{"flow_id": "f1"}]
    dm.get_pipelines.return_value = []
    dm.flows_service.get_flow.return_value = sample_flow_record

    hooks.add_filter(
        "dm_create_pipeline", lambda value, data: dm.create_pipeline(data)
    )
    hooks.add_filter(
        "dm_get_pipeline_flows",
        lambda value, pipeline_id: dm.get_pipeline_flows(pipeline_id),
    )
    hooks.add_filter("dm_get_pipelines", lambda value: dm.get_pipelines())
    hooks.add_filter(
        "dm_db", lambda databases: {**databases, "flows": dm.flows_service}
    )
    return dm
