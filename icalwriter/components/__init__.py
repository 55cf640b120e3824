"""
Concrete calendar components.  Each one knows its BEGIN/END type and
how to turn its own fields into a PropertyBag.
"""
