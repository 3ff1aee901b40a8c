"""Core pieces of errorlogger (models, classification, platform probing)."""

from . import config, errors

__all__ = ["config", "errors"]
