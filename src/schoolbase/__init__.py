"""SchoolBase API - multi-tenant school management backend."""

__version__ = "0.1.0"
