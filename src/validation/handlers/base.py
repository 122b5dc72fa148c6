"""
ValidationHandler — base class for links of the validation chain.

A handler accepts a fixed set of ValidationKinds. ``handle`` either processes
the request (never forwarding it) or hands it to the next link; when the
chain runs out, a failure naming the unhandled kind is returned. Exceptions
raised while validating are converted into failures here, so nothing ever
escapes to the caller.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional, Sequence

from src.config import messages
from src.models.validation import ValidationKind, ValidationRequest, ValidationResult
from src.validation.metrics import record_handler_exception, record_unhandled

logger = logging.getLogger(__name__)

CHAIN_HANDLER_NAME = "ChainOfResponsibility"


class ValidationHandler(ABC):
    """One link of the chain: knows how to validate a category of input."""

    #: Kinds this handler accepts; subclasses override.
    kinds: FrozenSet[ValidationKind] = frozenset()

    def __init__(self, name: str, priority: int) -> None:
        self._name = name
        self._priority = priority
        self._next: Optional["ValidationHandler"] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def next_handler(self) -> Optional["ValidationHandler"]:
        return self._next

    def set_next(self, handler: Optional["ValidationHandler"]) -> "ValidationHandler":
        """Link *handler* after this one. Only called while the chain is built."""
        self._next = handler
        return self

    def can_handle(self, request: ValidationRequest) -> bool:
        return request.kind in self.kinds

    def handle(self, request: ValidationRequest) -> ValidationResult:
        if self.can_handle(request):
            try:
                return self._do_handle(request)
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "%s raised while validating field '%s' (%s): %s",
                    self._name, request.field_name, request.kind.value, exc,
                    exc_info=True,
                )
                record_handler_exception(self._name)
                return ValidationResult.failure(
                    messages.HANDLER_ERROR % exc,
                    field_name=request.field_name,
                    handler_name=self._name,
                )

        if self._next is not None:
            return self._next.handle(request)

        logger.error("No handler accepted validation kind %s", request.kind.value)
        record_unhandled(request.kind.value)
        return ValidationResult.failure(
            messages.UNHANDLED_KIND % request.kind.value,
            field_name=request.field_name,
            handler_name=CHAIN_HANDLER_NAME,
        )

    @abstractmethod
    def _do_handle(self, request: ValidationRequest) -> ValidationResult:
        """Validate a request this handler accepts."""

    # ------------------------------------------------------------------
    # Result helpers
    # ------------------------------------------------------------------

    def success(
        self,
        message: str,
        field_name: Optional[str],
        processed_value: Any,
        warnings: Sequence[str] = (),
    ) -> ValidationResult:
        return ValidationResult.success(
            message,
            processed_value=processed_value,
            field_name=field_name,
            handler_name=self._name,
            warnings=warnings,
        )

    def error(self, errors: "str | Sequence[str]", field_name: Optional[str]) -> ValidationResult:
        return ValidationResult.failure(errors, field_name=field_name, handler_name=self._name)

    def unsupported(self, request: ValidationRequest) -> ValidationResult:
        return self.error(messages.KIND_NOT_SUPPORTED % request.kind.value, request.field_name)

    def __repr__(self) -> str:
        return f"{self._name} (priority: {self._priority})"
