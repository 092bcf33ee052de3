"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple resources use
(DB wiring, settings, logging, error mapping). Keep resource-specific SQL in
the corresponding resource package (e.g. `blogs/`).
"""
