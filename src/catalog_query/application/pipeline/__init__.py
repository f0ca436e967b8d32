"""Application pipeline – end-to-end catalog list queries."""
from catalog_query.application.pipeline.query import CatalogQuery, QueryPipeline, QueryResult, run_query

__all__ = ["CatalogQuery", "QueryPipeline", "QueryResult", "run_query"]
