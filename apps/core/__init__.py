"""Shared plumbing used by the business apps (serializer mixins, PDF helpers)."""
