from datetime import date
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from govuk_binders.constants import DatePartError


class DateErrorText(BaseModel):
    """Phrasing used to build date input error messages.

    ``name_at_start_of_sentence`` starts a message ("Date of birth does not
    include a day"); ``name_within_sentence`` follows other words
    ("Enter a real date of birth").
    """

    model_config = ConfigDict(frozen=True)

    name_at_start_of_sentence: str
    name_within_sentence: str

    @field_validator("name_at_start_of_sentence", "name_within_sentence")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("BLANK_ERROR_TEXT")
        return value


class AllEmpty(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["all_empty"] = "all_empty"


class FieldErrors(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["field_errors"] = "field_errors"
    message: str
    # Empty when every part parsed but the date does not exist.
    errors: Dict[str, DatePartError] = Field(default_factory=dict)


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    value: date


ValidationOutcome = Annotated[Union[AllEmpty, FieldErrors, Success], Field(discriminator="kind")]


class BindingResult(BaseModel):
    outcome: ValidationOutcome
    model: Optional[date] = None

    @property
    def is_model_set(self) -> bool:
        return isinstance(self.outcome, Success)


class ErrorSummaryItem(BaseModel):
    text: str
    href: str


class DateOfBirthResponse(BaseModel):
    valid: bool
    date_of_birth: Optional[str] = None  # yyyy-mm-dd
    display: Optional[str] = None
    errors: List[ErrorSummaryItem] = []
    values: Dict[str, Optional[str]] = {}


class HealthResponse(BaseModel):
    status: str
