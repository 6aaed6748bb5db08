"""
Services package for the structured data pipeline.

Key Services:
- HookRegistry: named extension points (filters)
- HookPipelineStore: Data Machine access through its filters
- Option stores: persisted pipeline and flow ids
- StructuredDataPipelineRegistrar: pipeline creation and lookups

Note: Services are typically imported directly from their modules.
"""

__all__ = [
    "hooks",
    "option_store",
    "pipeline_registrar",
    "pipeline_store",
]
