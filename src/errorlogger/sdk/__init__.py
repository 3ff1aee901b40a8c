"""Outward-facing SDK: client, configuration, hooks and CLI."""
