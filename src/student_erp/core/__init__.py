"""Core domain package: student record models and the owning collection."""
