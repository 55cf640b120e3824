#!/usr/bin/env python
import logging
from typing import Iterator

from icalwriter.component import Component
from icalwriter.lib.encoding import fold_line

log = logging.getLogger("icalwriter")


class Renderer:
    """
    Serializes a component tree to iCalendar text.

    The tree is walked depth first.  For every component the property
    bag is built once, right before its properties are written.  The
    complete text is assembled before anything is returned, so an
    EncodingError raised by any property leaves the caller with no
    output at all rather than a truncated calendar.
    """

    def render_lines(self, component: Component) -> Iterator[str]:
        """Yields the folded, CRLF-terminated lines of the component"""
        type_ = component.get_type()
        yield fold_line(f"BEGIN:{type_}")
        bag = component.build_property_bag()
        log.debug(f"rendering {type_} with {len(bag)} properties")
        yield from bag.render()
        for child in component.rendered_children():
            yield from self.render_lines(child)
        yield fold_line(f"END:{type_}")

    def render(self, component: Component) -> str:
        return "".join(list(self.render_lines(component)))


def render(component: Component) -> str:
    return Renderer().render(component)
