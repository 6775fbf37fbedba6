"""Re-prompting field collection for interactive input."""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from dataclasses import dataclass, field

from flight_carbon.models import is_iata_code

LOGGER = logging.getLogger(__name__)

Predicate = Callable[[str], bool]
AskFn = Callable[[str], str]
NotifyFn = Callable[[str], None]


def is_non_negative_integer(value: str) -> bool:
    """Return whether ``value`` parses as an integer >= 0."""

    return value.isascii() and value.isdigit()


def is_positive_integer(value: str) -> bool:
    """Return whether ``value`` parses as an integer >= 1."""

    return is_non_negative_integer(value) and int(value) > 0


def is_airport_code(value: str) -> bool:
    """Return whether ``value`` looks like an IATA airport code."""

    return is_iata_code(value)


def one_of(allowed: Collection[str]) -> Predicate:
    """Build a predicate accepting only members of ``allowed``."""

    allowed_values = frozenset(allowed)

    def _predicate(value: str) -> bool:
        return value in allowed_values

    return _predicate


@dataclass(slots=True)
class FieldPrompter:
    """Collect single fields from the operator until they validate.

    ``ask`` displays a prompt and returns one raw line; ``notify`` displays
    an error message. Both default to the console. End of input propagates
    as :class:`EOFError` from ``ask``.
    """

    ask: AskFn = field(default=input)
    notify: NotifyFn = field(default=print)

    def collect(
        self,
        prompt: str,
        error_message: str,
        predicate: Predicate,
        *,
        optional: bool = False,
    ) -> str:
        """Prompt until the trimmed input satisfies ``predicate``.

        Args:
            prompt: Text displayed before each read.
            error_message: Text displayed after each rejected input.
            predicate: Rule the trimmed input must satisfy.
            optional: When true an empty input is accepted and returned as
                ``""`` so the caller can apply its default.

        Returns:
            The trimmed input. Never empty unless ``optional`` is set.
        """

        while True:
            value = self.ask(prompt).strip()
            if not value:
                if optional:
                    return ""
            elif predicate(value):
                return value
            LOGGER.debug("Rejected field input", extra={"prompt": prompt})
            self.notify(error_message)


def collect(
    prompt: str,
    error_message: str,
    predicate: Predicate,
    *,
    optional: bool = False,
    ask: AskFn = input,
    notify: NotifyFn = print,
) -> str:
    """Collect one field; see :meth:`FieldPrompter.collect`."""

    return FieldPrompter(ask=ask, notify=notify).collect(
        prompt, error_message, predicate, optional=optional
    )
