"""
Taxonomie des erreurs métier.

Chaque erreur porte un `kind` explicite ; la couche API choisit le code HTTP
à partir de ce tag (voir STATUS_BY_KIND) plutôt que par inspection de type.
"""

from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    PERSISTENCE = "persistence"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE: 409,
    ErrorKind.PERSISTENCE: 500,
}

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class AppError(Exception):
    kind: ErrorKind = ErrorKind.PERSISTENCE
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_body(self) -> dict:
        return {"message": self.message}


class ValidationError(AppError):
    """Entrée client invalide. `errors` liste les problèmes champ par champ."""
    kind = ErrorKind.VALIDATION
    default_message = "Validation error"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, errors) -> "ValidationError":
        """Construit l'erreur à partir de `exc.errors()` (pydantic ou RequestValidationError)."""
        problems = []
        for err in errors:
            loc = [str(part) for part in err.get("loc", ()) if part != "body"]
            field = ".".join(loc) or "body"
            problems.append(f"{field}: {err.get('msg', 'invalid value')}")
        return cls(problems)

    def to_body(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class AuthenticationError(AppError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Authentication required"


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Admin access required"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class DuplicateError(AppError):
    kind = ErrorKind.DUPLICATE
    default_message = "Already exists"


class PersistenceError(AppError):
    """Échec du stockage. Le message reste générique : le détail va uniquement dans les logs."""
    kind = ErrorKind.PERSISTENCE
