"""
Pydantic schema definitions for catalog records.

Each collection (paintings, artists, galleries) defines its own
Pydantic models.  Only the fields used for filtering are declared and
typed; every other key of the source JSON objects is kept as an extra
field so that responses reproduce the fixture records unchanged.
Declared fields carry the source JSON key as their alias, and
FastAPI serializes responses by alias.
"""
