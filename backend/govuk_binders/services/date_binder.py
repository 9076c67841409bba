"""Mandatory date binder.

Reads a GOV.UK date input submitted as three fields (``{field}-day``,
``{field}-month``, ``{field}-year``), validates it and either binds a
``date`` or attaches one aggregate error message to ``{field}``.
"""

from datetime import date
from typing import Dict, Mapping, Optional
import logging

from govuk_binders.constants import (
    DATE_PARTS,
    DatePartError,
    MISSING_PART_SEPARATOR,
    MSG_DOES_NOT_INCLUDE,
    MSG_ENTER_REAL,
    part_key,
)
from govuk_binders.schemas import (
    AllEmpty,
    BindingResult,
    DateErrorText,
    FieldErrors,
    Success,
    ValidationOutcome,
)
from govuk_binders.services.model_state import ModelState, ValueProvider
from govuk_binders.utils.parsers import _parse_int32, format_long_date


logger = logging.getLogger("govuk.binder")


class BinderConfigurationError(RuntimeError):
    """The binder was wired without the error text it needs."""


def require_error_text(error_text: DateErrorText | None) -> DateErrorText:
    if error_text is None:
        raise BinderConfigurationError(
            "The mandatory date binder needs a DateErrorText "
            "(name_at_start_of_sentence / name_within_sentence) for every date field it binds."
        )
    return error_text


def _enter_real(error_text: DateErrorText) -> str:
    return MSG_ENTER_REAL.format(name_within_sentence=error_text.name_within_sentence)


def validate_date_parts(
    field_name: str,
    error_text: DateErrorText,
    raw_values: Mapping[str, Optional[str]],
) -> ValidationOutcome:
    """Validate raw day / month / year strings.

    Returns ``AllEmpty`` when nothing was entered, ``FieldErrors`` carrying a
    single message for the whole field, or ``Success`` with the date.
    """
    if all(not raw_values.get(part) for part in DATE_PARTS):
        logger.debug("date_binding_empty field=%s", field_name)
        return AllEmpty()

    errors: Dict[str, DatePartError] = {}
    values: Dict[str, int] = {}
    for part in DATE_PARTS:
        raw = raw_values.get(part)
        if not raw:
            errors[part] = DatePartError.MISSING
            continue
        parsed = _parse_int32(raw)
        if parsed is None:
            errors[part] = DatePartError.NOT_INTEGER
            continue
        values[part] = parsed

    if errors:
        if DatePartError.NOT_INTEGER in errors.values():
            message = _enter_real(error_text)
        else:
            message = MSG_DOES_NOT_INCLUDE.format(
                name_at_start_of_sentence=error_text.name_at_start_of_sentence,
                missing_parts=MISSING_PART_SEPARATOR.join(errors),
            )
        logger.info(
            "date_binding_failed field=%s reason=part_errors parts=%s",
            field_name, ",".join(f"{part}:{error.value}" for part, error in errors.items()),
        )
        return FieldErrors(message=message, errors=errors)

    try:
        value = date(values["year"], values["month"], values["day"])
    except ValueError:
        logger.info("date_binding_failed field=%s reason=not_a_calendar_date", field_name)
        return FieldErrors(message=_enter_real(error_text))

    return Success(value=value)


def bind_mandatory_date(
    field_name: str,
    error_text: DateErrorText | None,
    value_provider: ValueProvider,
    model_state: ModelState,
) -> BindingResult:
    """Bind ``field_name`` from its three parts into ``model_state``.

    Raw part values are always re-bound and marked valid so the form can be
    redisplayed as the user typed it; errors only ever land on ``field_name``.
    An empty submission binds nothing and records no error.
    """
    error_text = require_error_text(error_text)

    raw_values = {part: value_provider.get(part_key(field_name, part)) for part in DATE_PARTS}
    outcome = validate_date_parts(field_name, error_text, raw_values)
    if isinstance(outcome, AllEmpty):
        return BindingResult(outcome=outcome)

    for part, raw in raw_values.items():
        key = part_key(field_name, part)
        model_state.set_value(key, raw)
        model_state.mark_field_valid(key)

    if isinstance(outcome, FieldErrors):
        model_state.add_error(field_name, outcome.message)
        return BindingResult(outcome=outcome)

    model_state.set_value(field_name, format_long_date(outcome.value))
    return BindingResult(outcome=outcome, model=outcome.value)
