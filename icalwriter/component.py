#!/usr/bin/env python
"""
Base class for all calendar components (VCALENDAR, VEVENT, VFREEBUSY,
...).  A component renders as a ``BEGIN:<TYPE>`` / ``END:<TYPE>``
block holding its properties followed by its child components.

Rendering is a two-phase affair: build_property_bag() assembles a fresh
PropertyBag from the current field values, and the Renderer
serializes it.  Nothing is cached between renders, so a component may
be modified and rendered again at will.

Components are not thread safe.  Concurrent renders need independent
component trees.
"""
import logging
import sys
from abc import ABC
from abc import abstractmethod
from typing import ClassVar
from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence

from icalwriter.lib.error import InvalidArgument
from icalwriter.lib.python_utilities import to_wire
from icalwriter.property import PropertyBag

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

log = logging.getLogger("icalwriter")


class Component(ABC):
    component_type: ClassVar[Optional[str]] = None

    def __init__(self) -> None:
        self.children: List["Component"] = []
        self._child_index: Dict[str, int] = {}
        self._parent: Optional["Component"] = None

    def get_type(self) -> str:
        if self.component_type is None:
            raise ValueError("Unexpected value None for self.component_type")
        return self.component_type

    @abstractmethod
    def build_property_bag(self) -> PropertyBag:
        """
        Returns a new PropertyBag populated from the fields of this
        component.  Must not modify the component or its children.
        """

    def _fill_bag(self, bag: PropertyBag, rows) -> PropertyBag:
        """
        Sets properties from a table of (present, name, value) or
        (present, name, value, parameters) rows, skipping the rows
        where present is falsy.
        """
        for row in rows:
            present, name, value = row[:3]
            if present:
                bag.set(name, value, row[3] if len(row) > 3 else None)
        return bag

    def add_component(self, component: "Component", key: Optional[str] = None) -> Self:
        """
        Appends a child component.  If a key is given, the child can be
        found again through get_component_by_key().  Adding a second
        child with the same key makes the key point to the new child;
        the earlier child is still rendered.
        """
        if component is self:
            raise InvalidArgument("a component cannot be its own child")
        if component._parent is not None:
            raise InvalidArgument(
                f"{component.get_type()} component already belongs to a {component._parent.get_type()}"
            )
        component._parent = self
        self.children.append(component)
        if key is not None:
            if key in self._child_index:
                log.debug(f"component key {key!r} reassigned in {self.get_type()}")
            self._child_index[key] = len(self.children) - 1
        return self

    def get_component_by_key(self, key: Optional[str]) -> Optional["Component"]:
        if key is None or key not in self._child_index:
            return None
        return self.children[self._child_index[key]]

    def rendered_children(self) -> Sequence["Component"]:
        """The children to serialize, in order"""
        return self.children

    def render(self) -> str:
        from icalwriter.renderer import Renderer

        return Renderer().render(self)

    def to_ical(self) -> bytes:
        return to_wire(self.render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.children)} children)"
