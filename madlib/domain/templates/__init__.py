"""This module stores named madlib templates."""
from .entities import Template
from .repository import TemplateRepository, TemplateRepositoryProtocol
