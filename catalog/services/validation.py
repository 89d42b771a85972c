# catalog/services/validation.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from catalog.models.supplier import Supplier
from catalog.schemas.product import ProductIn

FieldErrors = Dict[str, List[str]]


@dataclass
class ValidationResult:
    data: Optional[ProductIn] = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.data is not None and not self.errors


def _collect(exc: ValidationError) -> FieldErrors:
    errors: FieldErrors = {}
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "body"
        errors.setdefault(name, []).append(error["msg"])
    return errors


def validate_product_payload(payload: Any, db: Optional[Session] = None) -> ValidationResult:
    """
    Check a create/update body before anything touches the store.

    With a session, ``supplier_id`` must also point at an existing supplier.
    """
    if not isinstance(payload, dict):
        return ValidationResult(errors={"body": ["The request body must be a JSON object."]})

    try:
        data = ProductIn.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=_collect(exc))

    if db is not None and db.get(Supplier, data.supplier_id) is None:
        return ValidationResult(errors={"supplier_id": ["The selected supplier id is invalid."]})

    return ValidationResult(data=data)
