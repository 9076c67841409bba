"""Model state and value providers.

The binder only needs two narrow capabilities from the host framework:
reading raw strings by form key and recording values / errors against keys.
These are the in-process implementations used by the FastAPI dependency and
by tests.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol
import logging

from starlette.datastructures import FormData

from govuk_binders import config


logger = logging.getLogger("govuk.forms")


class ValueProvider(Protocol):
    def get(self, key: str) -> Optional[str]:
        """Return the first submitted value for ``key`` or None when absent."""
        ...


class DictValueProvider:
    """Value provider over a plain mapping; list values are multi-valued fields."""

    def __init__(self, values: Mapping[str, Any]):
        self._values = values

    def get(self, key: str) -> Optional[str]:
        value = self._values.get(key)
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        if value is None:
            return None
        return str(value)


class FormValueProvider:
    """Value provider over a Starlette form submission."""

    def __init__(self, form: FormData):
        self._form = form

    def get(self, key: str) -> Optional[str]:
        values = self._form.getlist(key)
        if not values:
            return None
        first = values[0]
        # File uploads are not text input.
        return first if isinstance(first, str) else None


class ModelState:
    """Bound raw values, validity marks and error messages keyed by form key."""

    def __init__(self, max_errors: int | None = None):
        self.max_errors = config.MAX_MODEL_ERRORS if max_errors is None else max_errors
        self._values: Dict[str, Optional[str]] = {}
        self._errors: Dict[str, List[str]] = {}
        self._valid: set[str] = set()

    def set_value(self, key: str, raw_value: Optional[str]) -> None:
        self._values[key] = raw_value

    def get_value(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def mark_field_valid(self, key: str) -> None:
        """Record ``key`` as individually valid, dropping any errors on it."""
        self._errors.pop(key, None)
        self._valid.add(key)

    def is_field_valid(self, key: str) -> bool:
        return key in self._valid and key not in self._errors

    def add_error(self, key: str, message: str) -> bool:
        if self.error_count >= self.max_errors:
            logger.warning("model_state_error_dropped key=%s max_errors=%s", key, self.max_errors)
            return False
        self._errors.setdefault(key, []).append(message)
        self._valid.discard(key)
        return True

    def errors_for(self, key: str) -> List[str]:
        return list(self._errors.get(key, []))

    @property
    def error_count(self) -> int:
        return sum(len(messages) for messages in self._errors.values())

    @property
    def is_valid(self) -> bool:
        return self.error_count == 0

    def error_summary(self) -> List[Dict[str, str]]:
        """Items for the GOV.UK error summary, in the order errors were added."""
        return [
            {"text": message, "href": f"#{key}"}
            for key, messages in self._errors.items()
            for message in messages
        ]
