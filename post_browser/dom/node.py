"""Mutable element tree with attribute queries and event listeners."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator, MutableMapping
from dataclasses import dataclass, field
from typing import Any

EventHandler = Callable[["Event"], Any]


@dataclass(slots=True)
class Event:
    type: str
    target: Element | None = None
    detail: Any = None


def _attribute_name(key: str) -> str:
    return key.replace("_", "-")


class Dataset(MutableMapping[str, str]):
    """``data-*`` attributes keyed by their snake_case suffix (``post_id``)."""

    def __init__(self, element: Element):
        self._element = element

    def _key(self, key: str) -> str:
        return "data-" + _attribute_name(key)

    def __getitem__(self, key: str) -> str:
        return self._element.attributes[self._key(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        self._element.attributes[self._key(key)] = str(value)

    def __delitem__(self, key: str) -> None:
        del self._element.attributes[self._key(key)]

    def __iter__(self) -> Iterator[str]:
        for name in self._element.attributes:
            if name.startswith("data-"):
                yield name[5:].replace("-", "_")

    def __len__(self) -> int:
        return sum(1 for _ in self)


class ClassList:
    def __init__(self) -> None:
        self._names: list[str] = []

    def add(self, *names: str) -> None:
        for name in names:
            if name not in self._names:
                self._names.append(name)

    def remove(self, *names: str) -> None:
        self._names = [name for name in self._names if name not in names]

    def toggle(self, name: str) -> bool:
        """Flip ``name`` and return whether it is now present."""
        if name in self._names:
            self._names.remove(name)
            return False
        self._names.append(name)
        return True

    def contains(self, name: str) -> bool:
        return name in self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __str__(self) -> str:
        return " ".join(self._names)


class ParentNode:
    """Shared child management for elements and fragments."""

    def __init__(self) -> None:
        self.children: list[Element] = []

    def append_child(self, node: ParentNode) -> ParentNode:
        """Append ``node``; a fragment is emptied into this node instead."""
        if isinstance(node, DocumentFragment):
            moved = list(node.children)
            node.children.clear()
            for child in moved:
                child.parent = None
                self._adopt(child)
            return node
        if not isinstance(node, Element):
            raise TypeError(f"Cannot append {type(node)!r}")
        if node.parent is not None:
            node.parent.remove_child(node)
        self._adopt(node)
        return node

    def _adopt(self, child: Element) -> None:
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: Element) -> Element:
        try:
            self.children.remove(child)
        except ValueError as exc:
            raise ValueError("The node to be removed is not a child of this node.") from exc
        child.parent = None
        return child

    @property
    def last_element_child(self) -> Element | None:
        return self.children[-1] if self.children else None

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    def iter_descendants(self) -> Iterator[Element]:
        """Depth-first pre-order walk of every element below this node."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def query_selector_all(self, tag: str | None = None, **attributes: Any) -> list[Element]:
        """Return descendants matching ``tag`` and attribute equality.

        Attribute keyword names use underscores for hyphens, so
        ``data_post_id=3`` matches ``data-post-id="3"``.
        """
        return [node for node in self.iter_descendants() if node.matches(tag, **attributes)]

    def query_selector(self, tag: str | None = None, **attributes: Any) -> Element | None:
        for node in self.iter_descendants():
            if node.matches(tag, **attributes):
                return node
        return None


class DocumentFragment(ParentNode):
    """Detached container whose children move on append."""

    def __repr__(self) -> str:
        return f"DocumentFragment(children={len(self.children)})"


class Element(ParentNode):
    def __init__(self, tag: str):
        super().__init__()
        self.tag = tag.lower()
        self.attributes: dict[str, str] = {}
        self.class_list = ClassList()
        self.parent: ParentNode | None = None
        self.disabled = False
        self._text = ""
        self._listeners: dict[str, list[EventHandler]] = {}

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, attributes={self.attributes!r}, class={str(self.class_list)!r})"

    # ----------------------------------------------------------- Attributes
    @property
    def dataset(self) -> Dataset:
        return Dataset(self)

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    @id.setter
    def id(self, value: str) -> None:
        self.attributes["id"] = str(value)

    @property
    def value(self) -> str:
        return self.attributes.get("value", "")

    @value.setter
    def value(self, value: Any) -> None:
        self.attributes["value"] = str(value)

    @property
    def class_name(self) -> str:
        return str(self.class_list)

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.class_list = ClassList()
        self.class_list.add(*value.split())

    def set_attribute(self, name: str, value: Any) -> None:
        if name == "class":
            self.class_name = str(value)
            return
        self.attributes[name] = str(value)

    def get_attribute(self, name: str) -> str | None:
        if name == "class":
            return self.class_name or None
        return self.attributes.get(name)

    def matches(self, tag: str | None = None, **attributes: Any) -> bool:
        if tag is not None and self.tag != tag.lower():
            return False
        for key, expected in attributes.items():
            if self.get_attribute(_attribute_name(key)) != str(expected):
                return False
        return True

    # ----------------------------------------------------------------- Text
    @property
    def text_content(self) -> str:
        return self._text + "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, value: Any) -> None:
        for child in list(self.children):
            self.remove_child(child)
        self._text = "" if value is None else str(value)

    @property
    def own_text(self) -> str:
        return self._text

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.remove_child(self)

    # --------------------------------------------------------------- Events
    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._listeners.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def remove_event_listener(self, event_type: str, handler: EventHandler) -> bool:
        """Remove ``handler`` by identity; return whether it was registered."""
        handlers = self._listeners.get(event_type, [])
        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                return True
        return False

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, ()))

    def dispatch_event(self, event: Event) -> list[Any]:
        """Call every listener for ``event.type`` in registration order."""
        if event.target is None:
            event.target = self
        return [handler(event) for handler in list(self._listeners.get(event.type, ()))]

    async def emit(self, event: Event) -> list[Any]:
        """Dispatch ``event`` and await any coroutine results in order."""
        results = []
        for result in self.dispatch_event(event):
            if inspect.isawaitable(result):
                result = await result
            results.append(result)
        return results


@dataclass(slots=True)
class Document:
    """Root of an element tree with a single ``<body>``."""

    body: Element = field(default_factory=lambda: Element("body"))

    def create_element(self, tag: str) -> Element:
        return Element(tag)

    def create_document_fragment(self) -> DocumentFragment:
        return DocumentFragment()

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self.body.query_selector(id=element_id)

    def query_selector(self, tag: str | None = None, **attributes: Any) -> Element | None:
        if self.body.matches(tag, **attributes):
            return self.body
        return self.body.query_selector(tag, **attributes)

    def query_selector_all(self, tag: str | None = None, **attributes: Any) -> list[Element]:
        matches = [self.body] if self.body.matches(tag, **attributes) else []
        return matches + self.body.query_selector_all(tag, **attributes)


__all__ = [
    "ClassList",
    "Dataset",
    "Document",
    "DocumentFragment",
    "Element",
    "Event",
    "EventHandler",
    "ParentNode",
]
