"""
Notes API.

- core/: Configuration, logging, errors, middleware, dependencies
- models/: Note snapshot model
- schemas/: Request values and response envelopes
- services/: Validator and in-memory note store
- api/: HTTP routes (notes, health)
- cli/: HTTP client and demo walk-through
"""
