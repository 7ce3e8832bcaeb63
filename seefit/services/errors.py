# seefit/services/errors.py
"""
Errores de dominio. Los servicios los lanzan y la factory los traduce a JSON.
"""


class SeeFitError(Exception):
    """Base de todos los errores de la app."""


class NotFound(SeeFitError):
    """El id pedido no existe."""


class ConstraintViolation(SeeFitError):
    """Un INSERT viola una restricción (PK duplicada, NOT NULL, CHECK...)."""


class StorageUnavailable(SeeFitError):
    """No se puede hablar con la base de datos."""


class ValidationError(SeeFitError):
    """Entrada rechazada antes de llegar a la base de datos."""

    def __init__(self, message="Datos inválidos", fields=None):
        super().__init__(message)
        self.fields = fields or {}
