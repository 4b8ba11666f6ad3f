"""Immutable MIME type value object: construction, parsing, and matching."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic_core import core_schema

from .config import settings
from .errors import (
    EmptyFieldError,
    IllegalWildcardError,
    InvalidElementError,
    MalformedParameterError,
    MimeTypeError,
    MissingSubtypeError,
)
from .grammar import is_quoted_string, unquote, validate_token

WILDCARD = "*"
CHARSET = "charset"

_T = TypeVar("_T", bound="MimeType")

ParameterInput = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _to_parameter_dict(parameters: ParameterInput | None) -> dict[str, str]:
    if not parameters:
        return {}
    pairs = parameters.items() if isinstance(parameters, Mapping) else parameters
    return {str(name): str(value) for name, value in pairs}


def _glob_matches(pattern: MimeType, target: MimeType) -> bool:
    # Matched per segment so "*" never spans the "/".
    return fnmatchcase(target.type.lower(), pattern.type.lower()) and fnmatchcase(
        target.subtype.lower(), pattern.subtype.lower()
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class MimeType:
    """A MIME type such as ``text/html;charset=utf-8``.

    Instances are validated on construction and never change afterwards.
    Methods that "modify" a MIME type return a new instance.

    The constructor accepts a wildcard type with a concrete subtype
    (``MimeType("*", "json")``); :meth:`parse` is where the "only ``*/*``"
    rule is enforced and raises :class:`IllegalWildcardError`.

    Examples::

        mt = MimeType.parse("application/atom+xml;charset=utf-8")
        mt.subtype_suffix            # "xml"
        MimeType("application", "*+xml").includes(mt)   # True
    """

    type: str = WILDCARD
    subtype: str = WILDCARD
    parameters: Mapping[str, str] = field(default_factory=dict)
    charset: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.type:
            raise EmptyFieldError('Parameter "type" must not be empty.')
        if not self.subtype:
            raise EmptyFieldError('Parameter "subtype" must not be empty.')

        validate_token(self.type)
        validate_token(self.subtype)

        params = _to_parameter_dict(self.parameters)
        charset: str | None = None
        for name, value in params.items():
            self._validate_parameter(name, value)
            if charset is None and name.lower() == CHARSET:
                charset = unquote(value)

        object.__setattr__(self, "parameters", MappingProxyType(params))
        object.__setattr__(self, "charset", charset)

    def _validate_parameter(self, name: str, value: str) -> None:
        if not name:
            raise EmptyFieldError("Parameter name must not be empty.")
        if not value:
            raise EmptyFieldError(f'Value of parameter "{name}" must not be empty.')
        validate_token(name)
        if not is_quoted_string(value):
            validate_token(value)

    # -- parsing -----------------------------------------------------------

    @classmethod
    def parse(cls: type[_T], value: str, *, strict: bool | None = None) -> _T:
        """Parse ``type/subtype(;name=value)*`` into a new instance.

        Parameter segments that are not a single ``name=value`` pair are
        skipped, unless *strict* is true (or the ``MIMEKIT_STRICT_PARAMETERS``
        setting is on when *strict* is ``None``), in which case they raise
        :class:`MalformedParameterError`.
        """
        if strict is None:
            strict = settings.cfg.strict_parameters

        if not value:
            raise EmptyFieldError("MIME type must not be empty.")

        segments = [segment.strip() for segment in value.split(";")]
        full_type = segments[0]
        if not full_type:
            raise EmptyFieldError(f'No type/subtype in "{value}".')

        mtype, slash, subtype = full_type.partition("/")
        if not slash:
            raise MissingSubtypeError(f'MIME type "{full_type}" does not contain "/".')
        if not subtype:
            raise MissingSubtypeError(f'MIME type "{full_type}" has no subtype after "/".')
        if mtype == WILDCARD and subtype != WILDCARD:
            raise IllegalWildcardError('Wildcard type is legal only in "*/*" (all MIME types).')

        parameters: dict[str, str] = {}
        for segment in segments[1:]:
            if not segment:
                continue
            pair = segment.split("=")
            if len(pair) != 2:
                if strict:
                    raise MalformedParameterError(f'Malformed parameter "{segment}" in "{value}".')
                continue
            parameters[pair[0].strip()] = pair[1].strip()

        return cls(mtype, subtype, parameters)

    @classmethod
    def try_parse(cls: type[_T], value: str) -> _T | None:
        """Like :meth:`parse`, but return ``None`` for invalid input."""
        try:
            return cls.parse(value)
        except MimeTypeError:
            return None

    # -- accessors ---------------------------------------------------------

    @property
    def full_type(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def subtype_suffix(self) -> str | None:
        """The structured syntax suffix, e.g. ``xml`` for ``atom+xml``."""
        _, plus, suffix = self.subtype.partition("+")
        return suffix if plus and suffix else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "subtype": self.subtype,
            "suffix": self.subtype_suffix,
            "parameters": dict(self.parameters),
            "charset": self.charset,
            "wildcard_type": self.is_wildcard_type(),
            "wildcard_subtype": self.is_wildcard_subtype(),
            "concrete": self.is_concrete(),
            "value": str(self),
        }

    def get_parameter(self, name: str, default: str | None = None) -> str | None:
        return self.parameters.get(name, default)

    def is_wildcard_type(self) -> bool:
        return self.type == WILDCARD

    def is_wildcard_subtype(self) -> bool:
        return self.subtype == WILDCARD or self.subtype.startswith("*+")

    def is_concrete(self) -> bool:
        return not self.is_wildcard_type() and not self.is_wildcard_subtype()

    # -- derived copies ----------------------------------------------------

    def with_parameter(self: _T, name: str, value: Any) -> _T:
        params = dict(self.parameters)
        params[name] = value
        return type(self)(self.type, self.subtype, params)

    def without_parameter(self: _T, name: str) -> _T:
        if name not in self.parameters:
            return self
        params = {k: v for k, v in self.parameters.items() if k != name}
        return type(self)(self.type, self.subtype, params)

    # -- matching ----------------------------------------------------------

    def includes(self, other: MimeType) -> bool:
        """Return True if this MIME type includes *other*.

        ``text/*`` includes ``text/plain`` and ``text/html``, and
        ``application/*+xml`` includes ``application/soap+xml``. The
        relation is not symmetric.
        """
        if self.is_wildcard_type():
            return True
        if self.type.lower() != other.type.lower():
            return False
        if self.subtype.lower() == other.subtype.lower():
            return True
        if not self.is_wildcard_subtype():
            return False

        prefix, plus, suffix = self.subtype.partition("+")
        if not plus:
            return True
        _, other_plus, other_suffix = other.subtype.partition("+")
        if not other_plus:
            return False
        return prefix == WILDCARD and suffix.lower() == other_suffix.lower()

    def is_compatible_with(self, other: MimeType) -> bool:
        """Symmetric counterpart of :meth:`includes`.

        ``text/*`` is compatible with ``text/plain`` and vice versa, and
        ``application/*`` with ``application/*+xml`` in either order.
        """
        return _glob_matches(self, other) or _glob_matches(other, self)

    def equals_type_and_subtype(self, other: MimeType) -> bool:
        return (
            self.type.lower() == other.type.lower()
            and self.subtype.lower() == other.subtype.lower()
        )

    def equals(self, other: MimeType) -> bool:
        """Type/subtype compared case-insensitively, parameters by name and value."""
        if self is other:
            return True
        return self.equals_type_and_subtype(other) and self._parameters_equal(other)

    def _parameters_equal(self, other: MimeType) -> bool:
        if len(self.parameters) != len(other.parameters):
            return False
        for name, value in self.parameters.items():
            if name not in other.parameters:
                return False
            if name.lower() == CHARSET:
                if self.charset != other.charset:
                    return False
            elif value != other.parameters[name]:
                return False
        return True

    def is_in(self, mime_types: Iterable[Any] | Mapping[Any, Any]) -> bool:
        """Return True if any element has the same type and subtype."""
        entries = mime_types.items() if isinstance(mime_types, Mapping) else enumerate(mime_types)
        for index, candidate in entries:
            if not isinstance(candidate, MimeType):
                raise InvalidElementError(index, candidate)
            if candidate.equals_type_and_subtype(self):
                return True
        return False

    # -- protocols ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        params = frozenset(
            (name, self.charset if name.lower() == CHARSET else value)
            for name, value in self.parameters.items()
        )
        return hash((self.type.lower(), self.subtype.lower(), params))

    def __str__(self) -> str:
        return self.full_type + "".join(f";{name}={value}" for name, value in self.parameters.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # -- pydantic ----------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, _source: Any, _handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _coerce(cls: type[_T], value: Any) -> _T:
        if isinstance(value, cls):
            return value
        if isinstance(value, MimeType):
            return cls(value.type, value.subtype, value.parameters)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"Expected a MIME type string, got {type(value).__name__}.")
