# filmorate/services/api/errors.py
from __future__ import annotations

from contextlib import contextmanager
from http import HTTPStatus

from fastapi import HTTPException

from filmorate.domain.errors import NotFound, ValidationFailure


@contextmanager
def domain_errors():
    """
    Render domain errors as HTTP errors at the router boundary:
    ValidationFailure -> 400, NotFound -> 404.
    """
    try:
        yield
    except ValidationFailure as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e
    except NotFound as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e)) from e
