# qif_codec/data_model/interfaces/i_parser_emitter.py
"""
Generic, runtime-checkable protocol for bidirectional text ↔ object converters.

This protocol models a *pair* of operations over the QIF text format: a
**parser** that converts a textual document into a domain object, and an
**emitter** that serializes such an object back to text.

The protocol is generic in the item type ``T`` to allow strong typing at call
sites (e.g., ``IParserEmitter[IQifDocument]``).

### Expectations for implementers

- **Determinism:** Given the same input string and date format, ``parse``
  must produce equal objects. Given the same object, ``emit`` must produce
  byte-for-byte identical text.
- **Best effort:** ``parse`` never raises for malformed content. Pieces of
  the input that cannot be understood contribute nothing to the result.
- **Canonical output:** ``emit`` writes the fixed QIF layout (``\\r\\n`` line
  endings, two-decimal amounts) so that ``emit(parse(emit(x))) == emit(x)``.
- **Purity:** ``parse`` and ``emit`` avoid global state and never mutate
  their arguments.

Note: This is a **structural** type (``typing.Protocol``). Any class with
matching attributes/methods is considered compatible without explicit
inheritance.
"""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Protocol, runtime_checkable

from .enum_date_format import DateFormat

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    """
    Runtime-checkable protocol for paired parser/emitter implementations.

    Parameters shared by both operations
    ------------------------------------
    date_format : DateFormat
        Pattern used for every ``D`` line. It is chosen per call and never
        stored on the parsed records.
    """

    def parse(self, unparsed_string: str, date_format: DateFormat = ...) -> T:
        """
        Parse a complete textual document.

        Parameters
        ----------
        unparsed_string : str
            The full contents of the source document.

        Returns
        -------
        T
            The parsed object. Unrecognized pieces are skipped, so an empty
            or entirely malformed input yields an empty object.
        """
        ...

    def emit(self, item: T, date_format: DateFormat = ...) -> str:
        """
        Serialize ``item`` into a single textual document.

        Returns
        -------
        str
            The emitted document as a Unicode string in canonical layout.
        """
        ...
