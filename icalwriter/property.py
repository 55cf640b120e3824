"""
The generic property model: a Property is one ``NAME;PARAM=VAL:VALUE``
content line, a PropertyBag is the ordered set of properties a
component renders.
"""
import re
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Dict
from typing import Iterator
from typing import List
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from icalwriter.lib.encoding import check_raw_value
from icalwriter.lib.encoding import escape_value
from icalwriter.lib.encoding import fold_line
from icalwriter.lib.encoding import format_parameter_value
from icalwriter.lib.error import EncodingError
from icalwriter.lib.error import InvalidArgument
from icalwriter.lib.python_utilities import to_unicode

_NAME_RE = re.compile(r"[A-Z0-9-]+")

ParameterValue = Union[str, Sequence[str]]


def _check_name(name: str, what: str = "property") -> str:
    if not name:
        raise InvalidArgument(f"{what} name cannot be empty")
    name = str(name).upper()
    if not _NAME_RE.fullmatch(name):
        raise InvalidArgument(f"{what} name {name!r} is not a valid iCalendar token")
    return name


def _to_text(value) -> str:
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, bytes):
        return to_unicode(value)
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class Property:
    """
    One iCalendar property.

    Attributes:
        name: Property name, stored upper case (``DTSTART``)
        value: A text value, or a tuple of text values which will be
               joined with commas when rendered (``CATEGORIES``)
        parameters: Read-only ordered mapping of parameter names to values
        escape: Set to False for structured values like RECUR, which
                must not get TEXT escaping
    """

    name: str
    value: Union[str, Tuple[str, ...]]
    parameters: Mapping[str, ParameterValue] = field(default_factory=dict)
    escape: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _check_name(self.name))
        if isinstance(self.value, (list, tuple)):
            value = tuple(_to_text(v) for v in self.value)
        else:
            value = _to_text(self.value)
        object.__setattr__(self, "value", value)
        params: Dict[str, ParameterValue] = {}
        for key, val in (self.parameters or {}).items():
            params[_check_name(key, "parameter")] = (
                tuple(_to_text(v) for v in val)
                if isinstance(val, (list, tuple))
                else _to_text(val)
            )
        object.__setattr__(self, "parameters", MappingProxyType(params))

    def __hash__(self) -> int:
        return hash(
            (self.name, self.value, tuple(self.parameters.items()), self.escape)
        )

    def _encode_value(self) -> str:
        encode = escape_value if self.escape else check_raw_value
        if isinstance(self.value, tuple):
            return ",".join(encode(v) for v in self.value)
        return encode(self.value)

    def content_line(self) -> str:
        """Returns the logical (unfolded) content line, without CRLF"""
        try:
            parts = [self.name]
            for key, val in self.parameters.items():
                parts.append(f"{key}={format_parameter_value(val)}")
            return ";".join(parts) + ":" + self._encode_value()
        except EncodingError as e:
            if not e.property_name:
                e.property_name = self.name
            raise

    def render(self) -> str:
        """Returns the folded, CRLF-terminated text of this property"""
        return fold_line(self.content_line())

    def __str__(self) -> str:
        return self.content_line()


class PropertyBag:
    """
    Ordered collection of the properties of one component.

    Single-valued properties are stored with set(), which replaces an
    existing property of the same name but keeps its position.
    Properties that may legitimately repeat (ATTENDEE, FREEBUSY) are
    stored with add().  When rendering, the set() properties come first
    in the order they were first set, followed by the add() properties
    in the order they were added.  The bag never reorders or filters
    anything beyond that; ordering within the output is the caller's
    business.
    """

    def __init__(self) -> None:
        self._elements: Dict[str, Property] = {}
        self._repeated: List[Property] = []

    def set(
        self,
        name: str,
        value,
        parameters: Optional[Mapping[str, ParameterValue]] = None,
    ) -> Property:
        prop = Property(name, value, parameters or {})
        self._elements[prop.name] = prop
        return prop

    def add(self, prop: Property) -> Property:
        self._repeated.append(prop)
        return prop

    def get(self, name: str) -> Optional[Property]:
        """Returns the property stored with set(), or None"""
        return self._elements.get(name.upper())

    def __contains__(self, name: str) -> bool:
        name = name.upper()
        return name in self._elements or any(p.name == name for p in self._repeated)

    def __iter__(self) -> Iterator[Property]:
        yield from self._elements.values()
        yield from self._repeated

    def __len__(self) -> int:
        return len(self._elements) + len(self._repeated)

    def render(self) -> List[str]:
        return [prop.render() for prop in self]
