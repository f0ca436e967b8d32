"""
catalog_query – In-memory query engine for the game reference catalog.

Import path convention::

    from catalog_query.application.pipeline import CatalogQuery, QueryPipeline
    from catalog_query.application.filtering import FilterFieldSpec, FieldKind
    from catalog_query.application.pagination import paginate
    from catalog_query.config.validation import ConfigurationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
