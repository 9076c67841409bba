"""Form submission router.

Example GOV.UK question pages bound with the mandatory date binder.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from govuk_binders.constants import DATE_PARTS, part_key
from govuk_binders.schemas import AllEmpty, DateErrorText, DateOfBirthResponse
from govuk_binders.routers.dependencies import DateFieldBinding, MandatoryDateField

router = APIRouter(prefix="/api/forms", tags=["forms"])
logger = logging.getLogger("govuk.forms")

DATE_OF_BIRTH_FIELD = "dateOfBirth"
DATE_OF_BIRTH_ERROR_TEXT = DateErrorText(
    name_at_start_of_sentence="Date of birth",
    name_within_sentence="date of birth",
)

date_of_birth_field = MandatoryDateField(DATE_OF_BIRTH_FIELD, DATE_OF_BIRTH_ERROR_TEXT)


@router.post(
    "/date-of-birth",
    response_model=DateOfBirthResponse,
    responses={422: {"model": DateOfBirthResponse}},
)
async def submit_date_of_birth(binding: DateFieldBinding = Depends(date_of_birth_field)):
    """Date of birth question: the date on success, else the error summary and the values as typed."""
    state = binding.model_state
    # The binder leaves an empty submission alone; this question is mandatory.
    if isinstance(binding.result.outcome, AllEmpty):
        state.add_error(DATE_OF_BIRTH_FIELD, f"Enter {DATE_OF_BIRTH_ERROR_TEXT.name_within_sentence}")

    values = {part: state.get_value(part_key(DATE_OF_BIRTH_FIELD, part)) for part in DATE_PARTS}

    if not binding.result.is_model_set:
        logger.info("form_rejected form=date-of-birth errors=%s", state.error_count)
        body = DateOfBirthResponse(valid=False, errors=state.error_summary(), values=values)
        return JSONResponse(status_code=422, content=body.model_dump())

    return DateOfBirthResponse(
        valid=True,
        date_of_birth=binding.result.model.isoformat(),
        display=state.get_value(DATE_OF_BIRTH_FIELD),
        values=values,
    )
