"""
Structured Data Pipeline - registers the structured data analysis pipeline with Data Machine

Data Machine is a separately-installed orchestration system. This package:
- Builds the static three-step pipeline definition (fetch, AI analysis, post metadata update)
- Hands it to Data Machine through its extension points and records the created ids
- Answers read-only queries about the registered pipeline and its flow steps
"""

from structured_data_pipeline._version import __version__

__all__ = ["__version__"]
