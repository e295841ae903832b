"""This module stores the candidate values for madlib fields."""
from .repository import FieldRepository, FieldRepositoryProtocol
