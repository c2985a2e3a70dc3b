"""Run coordination package"""
from .run_coordinator import RunCoordinator

__all__ = ["RunCoordinator"]
