"""Customer API - customer records service.

Stores customer contact records with soft deletion, email uniqueness
among active records, filtered and paginated listing, and bulk creation
of generated sample customers, served over HTTP with FastAPI.
"""

__version__ = "0.1.0"
