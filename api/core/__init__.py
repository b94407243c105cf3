"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that every resource uses
(DB wiring, settings, error translation, path parsing). Keep resource-specific
SQL and HTTP handling in the corresponding package (e.g. `posts/`).
"""
