"""Bright Sky endpoint integrations.

Each subdirectory is one endpoint with a consistent structure:

    datasources/{endpoint}/
    ├── __init__.py       # Public API re-exports
    ├── query.py          # Fluent query builder (validation + params)
    └── models.py         # Pydantic models for the response envelope

``query.py`` at this level holds the shared builder base classes.

Adding an endpoint
------------------
1. Create ``datasources/{endpoint}/`` with the files above.
   See ``alerts/`` for a minimal example, ``radar/`` for a richer one.

2. Subclass ``QueryBuilder`` (or ``StationQueryBuilder``), set
   ``endpoint`` and ``response_model``, and implement ``params()``::

       @dataclass
       class ThingQueryBuilder(QueryBuilder):
           endpoint = "thing"
           response_model = ThingResponse

           def params(self) -> Params:
               return self._location_params()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add a typed shorthand to ``BrightSkyClient`` if callers need one.

5. Add tests in ``tests/test_{endpoint}.py``.
"""
