"""
Core module - logging setup.
"""
from fhir_init.core.log_config import setup_logging

__all__ = ["setup_logging"]
