"""FieldRules: fluent, append-only rule list for one field.

Every constraint method appends exactly one token and returns the same
instance, so calls chain::

    field("age").required().numeric().between(1, 10)

INVARIANT: tokens are only ever appended; no method removes or reorders.
The single exception to "exactly one" is :meth:`FieldRules.dimensions`
called without bounds, which appends nothing.

Parameter values are not checked. A negative size or a malformed date
yields a well-formed but meaningless token; the downstream engine decides.
The only validating method is :meth:`FieldRules.email`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fieldrules.config.models import RulesConfig
from fieldrules.domain.tokens import (
    ARGUMENT_SEPARATOR,
    as_list,
    bare,
    format_argument,
    join_arguments,
    parameterized,
)
from fieldrules.domain.types import EmailValidation

logger = logging.getLogger(__name__)

Number = int | float
Values = str | Iterable[str]

_EMAIL_VALIDATIONS = frozenset(v.value for v in EmailValidation)


class FieldRules:
    """Ordered rule tokens for a single named field.

    Attributes:
        field: Name of the field under validation. Fixed at construction.
        rules: Snapshot of the tokens appended so far, in call order.
    """

    __slots__ = ("_config", "_field", "_rules")

    def __init__(self, field: str, *, config: RulesConfig | None = None) -> None:
        if not field:
            msg = "Field name must not be empty"
            raise ValueError(msg)
        self._field = field
        self._rules: list[str] = []
        self._config = config if config is not None else RulesConfig()

    @property
    def field(self) -> str:
        return self._field

    @property
    def rules(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"FieldRules({self._field!r}, rules={self._rules!r})"

    def _add(self, token: str) -> FieldRules:
        self._rules.append(token)
        return self

    # ------------------------------------------------------------------
    # Escape hatch
    # ------------------------------------------------------------------

    def custom(self, rule: str) -> FieldRules:
        """Append *rule* verbatim, for rules without a dedicated method."""
        return self._add(rule)

    # ------------------------------------------------------------------
    # Bare rules
    # ------------------------------------------------------------------

    def accepted(self) -> FieldRules:
        """Value must be yes, on, 1 or true (e.g. terms-of-service checkboxes)."""
        return self._add(bare("accepted"))

    def active_url(self) -> FieldRules:
        """Hostname of the URL must have an A or AAAA DNS record."""
        return self._add(bare("active_url"))

    def alpha(self) -> FieldRules:
        return self._add(bare("alpha"))

    def alpha_dash(self) -> FieldRules:
        """Alpha-numeric characters, dashes and underscores."""
        return self._add(bare("alpha_dash"))

    def alpha_num(self) -> FieldRules:
        return self._add(bare("alpha_num"))

    def array(self) -> FieldRules:
        return self._add(bare("array"))

    def bail(self) -> FieldRules:
        """Stop running the remaining rules after the first failure."""
        return self._add(bare("bail"))

    def boolean(self) -> FieldRules:
        """Value must be castable to a boolean: true, false, 1, 0, "1" or "0"."""
        return self._add(bare("boolean"))

    def confirmed(self) -> FieldRules:
        """A matching ``<field>_confirmation`` input must be present."""
        return self._add(bare("confirmed"))

    def date(self) -> FieldRules:
        """Value must be a valid, non-relative date."""
        return self._add(bare("date"))

    def distinct(self) -> FieldRules:
        """Array values must not contain duplicates."""
        return self._add(bare("distinct"))

    def file(self) -> FieldRules:
        """Value must be a successfully uploaded file."""
        return self._add(bare("file"))

    def filled(self) -> FieldRules:
        """Value must not be empty when present."""
        return self._add(bare("filled"))

    def image(self) -> FieldRules:
        """Uploaded file must be an image (jpg, jpeg, png, bmp, gif, svg or webp)."""
        return self._add(bare("image"))

    def integer(self) -> FieldRules:
        return self._add(bare("integer"))

    def ip(self) -> FieldRules:
        return self._add(bare("ip"))

    def ipv4(self) -> FieldRules:
        # Older releases emitted "ip4", which names no engine rule.
        return self._add(bare("ipv4"))

    def ipv6(self) -> FieldRules:
        # Older releases emitted "ip6", which names no engine rule.
        return self._add(bare("ipv6"))

    def json(self) -> FieldRules:
        """Value must be a valid JSON string."""
        return self._add(bare("json"))

    def nullable(self) -> FieldRules:
        return self._add(bare("nullable"))

    def numeric(self) -> FieldRules:
        return self._add(bare("numeric"))

    def present(self) -> FieldRules:
        """Field must be present in the input but may be empty."""
        return self._add(bare("present"))

    def required(self) -> FieldRules:
        """Field must be present and not empty.

        Empty means None, an empty string, an empty array, or an uploaded
        file with no path.
        """
        return self._add(bare("required"))

    def string(self) -> FieldRules:
        return self._add(bare("string"))

    def timezone(self) -> FieldRules:
        """Value must be a valid timezone identifier."""
        return self._add(bare("timezone"))

    def url(self) -> FieldRules:
        return self._add(bare("url"))

    def uuid(self) -> FieldRules:
        """Value must be an RFC 4122 (version 1, 3, 4 or 5) UUID."""
        return self._add(bare("uuid"))

    # ------------------------------------------------------------------
    # Single-argument rules
    # ------------------------------------------------------------------

    def after(self, date_or_field: str) -> FieldRules:
        """Date must be after *date_or_field*, a date expression or another field name."""
        return self._add(parameterized("after", [date_or_field]))

    def after_or_equal(self, date_or_field: str) -> FieldRules:
        return self._add(parameterized("after_or_equal", [date_or_field]))

    def before(self, date_or_field: str) -> FieldRules:
        """Date must precede *date_or_field*, a date expression or another field name."""
        return self._add(parameterized("before", [date_or_field]))

    def before_or_equal(self, date_or_field: str) -> FieldRules:
        return self._add(parameterized("before_or_equal", [date_or_field]))

    def date_equals(self, date: str) -> FieldRules:
        return self._add(parameterized("date_equals", [date]))

    def date_format(self, fmt: str) -> FieldRules:
        """Value must match the date format *fmt*. Use either this or :meth:`date`, not both."""
        return self._add(parameterized("date_format", [fmt]))

    def different(self, field: str) -> FieldRules:
        return self._add(parameterized("different", [field]))

    def same(self, field: str) -> FieldRules:
        return self._add(parameterized("same", [field]))

    def gt(self, field: str) -> FieldRules:
        """Value must be greater than *field*; both must be of the same type."""
        return self._add(parameterized("gt", [field]))

    def gte(self, field: str) -> FieldRules:
        return self._add(parameterized("gte", [field]))

    def lt(self, field: str) -> FieldRules:
        """Value must be less than *field*; both must be of the same type."""
        return self._add(parameterized("lt", [field]))

    def lte(self, field: str) -> FieldRules:
        return self._add(parameterized("lte", [field]))

    def in_array(self, field: str) -> FieldRules:
        """Value must exist among the values of *field*."""
        return self._add(parameterized("in_array", [field]))

    def regex(self, pattern: str) -> FieldRules:
        """Value must match *pattern*, delimiters included (``"/^.+$/i"``).

        The pattern is passed through verbatim. A pattern containing ``|``
        or a comma may confuse the downstream parser.
        """
        return self._add(parameterized("regex", [pattern]))

    def not_regex(self, pattern: str) -> FieldRules:
        """Value must not match *pattern*, delimiters included."""
        return self._add(parameterized("not_regex", [pattern]))

    def digits(self, value: int) -> FieldRules:
        """Value must be numeric with exactly *value* digits."""
        return self._add(parameterized("digits", [value]))

    def max(self, value: Number) -> FieldRules:
        """Upper bound, measured the same way as :meth:`size`."""
        return self._add(parameterized("max", [value]))

    def min(self, value: Number) -> FieldRules:
        """Lower bound, measured the same way as :meth:`size`."""
        return self._add(parameterized("min", [value]))

    def multiple_of(self, value: Number) -> FieldRules:
        return self._add(parameterized("multiple_of", [value]))

    def size(self, value: Number) -> FieldRules:
        """Exact size.

        Characters for strings, the value itself for numerics (paired with
        :meth:`numeric` or :meth:`integer`), element count for arrays, and
        kilobytes for files.
        """
        return self._add(parameterized("size", [value]))

    def password(self, guard: str | None = None) -> FieldRules:
        """Value must match the authenticated user's password, optionally for *guard*."""
        if guard is None:
            return self._add(bare("password"))
        return self._add(parameterized("password", [guard]))

    # ------------------------------------------------------------------
    # Two-argument rules
    # ------------------------------------------------------------------

    def between(self, min_value: Number, max_value: Number) -> FieldRules:
        """Inclusive size range, measured the same way as :meth:`size`."""
        return self._add(parameterized("between", [min_value, max_value]))

    def digits_between(self, min_value: int, max_value: int) -> FieldRules:
        return self._add(parameterized("digits_between", [min_value, max_value]))

    def exclude_if(self, field: str, value: str) -> FieldRules:
        """Drop the field from validated data when *field* equals *value*."""
        return self._add(parameterized("exclude_if", [field, value]))

    def exclude_unless(self, field: str, value: str) -> FieldRules:
        """Drop the field from validated data unless *field* equals *value*."""
        return self._add(parameterized("exclude_unless", [field, value]))

    # ------------------------------------------------------------------
    # Value-list rules
    # ------------------------------------------------------------------

    def in_(self, values: Values) -> FieldRules:
        """Value must be one of *values*."""
        return self._add(parameterized("in", as_list(values)))

    def not_in(self, values: Values) -> FieldRules:
        """Value must not be one of *values*.

        Emits the camelCase ``notIn`` identifier, which the downstream engine
        resolves to the same rule as ``not_in``.
        """
        return self._add(parameterized("notIn", as_list(values)))

    def starts_with(self, values: Values) -> FieldRules:
        return self._add(parameterized("starts_with", as_list(values)))

    def ends_with(self, values: Values) -> FieldRules:
        return self._add(parameterized("ends_with", as_list(values)))

    def mimes(self, extensions: Values) -> FieldRules:
        """File MIME type must correspond to one of *extensions* (``"jpg"``, ``"pdf"``)."""
        return self._add(parameterized("mimes", as_list(extensions)))

    def mime_types(self, types: Values) -> FieldRules:
        """File MIME type must be one of *types* (``"video/avi"``)."""
        return self._add(parameterized("mimetypes", as_list(types)))

    # ------------------------------------------------------------------
    # Conditional requirement
    # ------------------------------------------------------------------

    def required_if(self, field: str, values: Values) -> FieldRules:
        """Required when *field* equals any of *values*."""
        return self._add(_conditional_token("required_if", field, values))

    def required_unless(self, field: str, values: Values) -> FieldRules:
        """Required unless *field* equals any of *values*."""
        return self._add(_conditional_token("required_unless", field, values))

    def required_with(self, fields: Values) -> FieldRules:
        """Required when any of *fields* is present."""
        return self._add(self._presence_token("required_with", fields))

    def required_with_all(self, fields: Values) -> FieldRules:
        """Required when all of *fields* are present."""
        return self._add(self._presence_token("required_with_all", fields))

    def required_without(self, fields: Values) -> FieldRules:
        """Required when any of *fields* is absent."""
        return self._add(self._presence_token("required_without", fields))

    def required_without_all(self, fields: Values) -> FieldRules:
        """Required when all of *fields* are absent."""
        return self._add(self._presence_token("required_without_all", fields))

    def _presence_token(self, name: str, fields: Values) -> str:
        if self._config.legacy_required_with:
            # Older releases dropped the colon: "required_witha,b".
            return name + join_arguments(as_list(fields))
        return parameterized(name, as_list(fields))

    # ------------------------------------------------------------------
    # Database-backed rules
    # ------------------------------------------------------------------

    def exists(
        self,
        source: str,
        column: str | None = None,
        connection: str | None = None,
    ) -> FieldRules:
        """Value must exist in table *source*.

        Renders ``exists:[connection.]source[,column]``.
        """
        args: list[object] = [_qualified_source(source, connection)]
        if column is not None:
            args.append(column)
        return self._add(parameterized("exists", args))

    def unique(
        self,
        source: str,
        column: str | None = None,
        except_id: str | int | None = None,
        id_column: str | None = None,
        connection: str | None = None,
    ) -> FieldRules:
        """Value must not already exist in table *source*.

        Renders ``unique:[connection.]source[,column][,except_id][,id_column]``.
        Only the qualifiers actually supplied are emitted, in that order;
        the column defaults to the field name on the engine side.

        Examples:
            >>> FieldRules("email").unique("users", "email", connection="tenant").rules
            ('unique:tenant.users,email',)
        """
        args: list[object] = [_qualified_source(source, connection)]
        args.extend(a for a in (column, except_id, id_column) if a is not None)
        return self._add(parameterized("unique", args))

    # ------------------------------------------------------------------
    # Validating and composite rules
    # ------------------------------------------------------------------

    def email(self, validations: str | Iterable[str] = ()) -> FieldRules:
        """Value must be an e-mail address, checked with the given validation styles.

        Styles: ``rfc``, ``strict``, ``dns``, ``spoof``, ``filter`` (see
        :class:`~fieldrules.domain.types.EmailValidation`). No styles yields
        the bare ``"email"`` token; the engine then applies ``rfc``.

        Raises:
            ValueError: If any style is not one of the five above. Nothing
                is appended in that case.
        """
        styles = [format_argument(v) for v in as_list(validations)]
        for style in styles:
            if style not in _EMAIL_VALIDATIONS:
                logger.debug("Rejected email validation style %r for %s", style, self._field)
                allowed = ", ".join(sorted(_EMAIL_VALIDATIONS))
                msg = f"Invalid email validation style {style!r}; expected one of: {allowed}"
                raise ValueError(msg)
        if not styles:
            return self._add(bare("email"))
        return self._add(parameterized("email", styles))

    def dimensions(
        self,
        min_width: int | None = None,
        max_width: int | None = None,
        min_height: int | None = None,
        max_height: int | None = None,
        width: int | None = None,
        height: int | None = None,
        ratio: float | str | None = None,
    ) -> FieldRules:
        """Image must satisfy the given dimension bounds.

        Only supplied bounds are rendered, as ``key=value`` pairs in the
        parameter order above. *ratio* may be a float (``1.5``) or a
        fraction string (``"3/2"``).

        Calling with no bounds at all appends nothing.
        """
        bounds = {
            "min_width": min_width,
            "max_width": max_width,
            "min_height": min_height,
            "max_height": max_height,
            "width": width,
            "height": height,
            "ratio": ratio,
        }
        pairs = [f"{key}={format_argument(val)}" for key, val in bounds.items() if val is not None]
        if not pairs:
            return self
        return self._add(parameterized("dimensions", pairs))


def _qualified_source(source: str, connection: str | None) -> str:
    """Prefix *source* with ``connection.`` when a connection is given."""
    if connection is None:
        return source
    return f"{connection}.{source}"


def _conditional_token(name: str, field: str, values: Values) -> str:
    """Render ``name:field,v1,v2``; the comma after *field* is kept when *values* is empty."""
    return parameterized(name, [field]) + ARGUMENT_SEPARATOR + join_arguments(as_list(values))
