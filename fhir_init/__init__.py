"""
FHIR database bootstrap - provisions the fhir_hca and fhir_hcb MongoDB databases.
"""

__version__ = "0.1.0"
