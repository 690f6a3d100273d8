"""Legal Ally: template-driven legal document generation service."""

__version__ = "0.1.0"
