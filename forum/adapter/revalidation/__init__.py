"""Page cache revalidation adapter."""

from .client import HttpPathRevalidator, RecordingPathRevalidator

__all__ = ["HttpPathRevalidator", "RecordingPathRevalidator"]
