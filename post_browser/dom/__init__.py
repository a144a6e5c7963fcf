"""Generic document tree used as the rendering target."""

from .node import ClassList, Dataset, Document, DocumentFragment, Element, Event, ParentNode

__all__ = ["ClassList", "Dataset", "Document", "DocumentFragment", "Element", "Event", "ParentNode"]
