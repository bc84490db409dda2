from __future__ import annotations

import logging
from datetime import date
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .validators import require_month

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(view):
    """Map domain errors raised by services to JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return json_error("Internal server error", 500)

    return wrapper


def month_args() -> tuple[int, int]:
    """Read ?year=&month= (defaulting to the current month)."""
    today = date.today()
    try:
        year = int(request.args.get("year", today.year))
        month = int(request.args.get("month", today.month))
    except ValueError:
        raise ValidationError("year and month must be integers") from None
    return require_month(year, month)
