# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bridge from pydantic request validation to the app's ``ValidationError``."""

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _dotted(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def describe(exc: PydanticValidationError) -> dict[str, Any]:
    """Field names and error kinds only; submitted values never leave the server."""

    issues = [
        {"field": _dotted(err["loc"]), "type": err["type"]}
        for err in exc.errors(include_url=False, include_input=False, include_context=False)
    ]
    return {
        "fields": sorted({issue["field"] for issue in issues}),
        "errors": issues,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=describe(exc)) from exc


__all__ = ["describe", "raise_validation_error"]
