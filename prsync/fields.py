"""Map canonical status names onto a task's status custom field."""

import logging
from collections.abc import Sequence

from prsync.errors import FieldNotFoundError, MissingOptionsError, NoCustomFieldsError
from prsync.models import CANONICAL_STATUSES, CODE_REVIEW, READY_FOR_QA, CustomField, StatusField

LOGGER = logging.getLogger("prsync.fields")

STATUS_FIELD_NAMES = ("STATUS", "DEV STATUS")


def normalize_option_label(label: str) -> str | None:
    """Reduce a decorated option label to its canonical status name.

    "🍕 code Review" -> "CODE REVIEW". Labels naming neither status give None.
    A label containing both names counts as READY FOR QA.
    """
    upper = label.upper()
    if READY_FOR_QA in upper:
        return READY_FOR_QA
    if CODE_REVIEW in upper:
        return CODE_REVIEW
    return None


def find_status_field(fields: Sequence[CustomField] | None) -> CustomField:
    if not fields:
        raise NoCustomFieldsError()
    for field in fields:
        if field.name.upper() in STATUS_FIELD_NAMES:
            return field
    raise FieldNotFoundError()


def reconcile_status_field(fields: Sequence[CustomField] | None) -> StatusField:
    """Locate the status field and resolve option ids for both canonical statuses.

    Raises NoCustomFieldsError, FieldNotFoundError or MissingOptionsError.
    When several options normalize to the same status the last one wins.
    """
    field = find_status_field(fields)

    options: dict[str, str] = {}
    for option in field.options:
        name = normalize_option_label(option.label)
        if name is None:
            LOGGER.debug("Ignoring option %r of field %s", option.label, field.id)
            continue
        options[name] = option.id

    missing = tuple(name for name in CANONICAL_STATUSES if name not in options)
    if missing:
        raise MissingOptionsError(CANONICAL_STATUSES, missing)

    return StatusField(field_id=field.id, options=options)
