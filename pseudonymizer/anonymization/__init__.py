from pseudonymizer.anonymization.base import BasePseudonymizer
from pseudonymizer.anonymization.engine import PseudonymizationEngine
from pseudonymizer.anonymization.models import FieldCategory, Row
from pseudonymizer.anonymization.policies import INVALID_IDENTIFIER
from pseudonymizer.anonymization.validators import is_valid_identifier

__all__ = [
    "INVALID_IDENTIFIER",
    "BasePseudonymizer",
    "FieldCategory",
    "PseudonymizationEngine",
    "Row",
    "is_valid_identifier",
]
