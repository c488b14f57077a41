"""
Domain layer package.

Contains pure business logic: entities, the error registry and its
catalog, domain errors. No framework imports, no IO.
"""
