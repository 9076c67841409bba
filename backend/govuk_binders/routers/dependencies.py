"""Dependencies for router injection.

``MandatoryDateField`` exposes the mandatory date binder as a FastAPI
dependency: the form body is read once per request and bound into a fresh
model state.
"""

from fastapi import Request

from govuk_binders.schemas import BindingResult, DateErrorText
from govuk_binders.services.date_binder import bind_mandatory_date, require_error_text
from govuk_binders.services.model_state import FormValueProvider, ModelState

__all__ = ["DateFieldBinding", "MandatoryDateField"]


class DateFieldBinding:
    """What a route receives: the field's model state and binding result."""

    def __init__(self, field_name: str, model_state: ModelState, result: BindingResult):
        self.field_name = field_name
        self.model_state = model_state
        self.result = result


class MandatoryDateField:
    def __init__(self, field_name: str, error_text: DateErrorText | None):
        # Fail at route declaration rather than on the first request.
        self.error_text = require_error_text(error_text)
        self.field_name = field_name

    async def __call__(self, request: Request) -> DateFieldBinding:
        form = await request.form()
        model_state = ModelState()
        result = bind_mandatory_date(
            self.field_name,
            self.error_text,
            FormValueProvider(form),
            model_state,
        )
        return DateFieldBinding(self.field_name, model_state, result)
