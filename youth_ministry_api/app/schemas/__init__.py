"""
Pydantic schema definitions for API payloads.

Every model derives from ``CamelModel`` so that Python code works with
snake_case attributes while the JSON wire format uses camelCase.
"""
