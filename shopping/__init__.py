"""Customer domain entities with validation, and customer event contracts with JSON serialisation."""

__version__ = "0.1.0"
__all__ = ["entities", "events"]