"""Adapters: Render the protocol schema to target-language sources."""
