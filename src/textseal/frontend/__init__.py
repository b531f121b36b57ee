"""Frontends for textseal."""
