"""
Version 1 of the API.

This subpackage bundles the root greeting and the user endpoints.
Breaking changes should be introduced in a new version subpackage
(e.g. ``v2``).
"""
