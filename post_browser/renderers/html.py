"""Serialise element trees to HTML markup."""

from __future__ import annotations

import html
from dataclasses import dataclass

from post_browser.dom import DocumentFragment, Element, ParentNode

from .base import HIDDEN_CLASS


@dataclass(slots=True)
class RenderOptions:
    indent: int | None = None
    include_hidden: bool = True


@dataclass(slots=True)
class HtmlRenderer:
    hidden_class: str = HIDDEN_CLASS

    def render(self, node: ParentNode, *, options: RenderOptions | None = None) -> str:
        opts = options or RenderOptions()
        if isinstance(node, DocumentFragment):
            parts = [self._render_element(child, opts, 0) for child in node.children]
        else:
            parts = [self._render_element(node, opts, 0)]
        separator = "\n" if opts.indent is not None else ""
        return separator.join(part for part in parts if part)

    # Internal helpers -------------------------------------------------
    def _render_element(self, element: Element, options: RenderOptions, depth: int) -> str:
        if not options.include_hidden and element.class_list.contains(self.hidden_class):
            return ""

        attributes = _format_attributes(element)
        open_tag = f"<{element.tag}{attributes}>"
        close_tag = f"</{element.tag}>"
        text = html.escape(element.own_text, quote=False)
        children = [
            rendered
            for child in element.children
            if (rendered := self._render_element(child, options, depth + 1))
        ]

        if options.indent is None:
            return f"{open_tag}{text}{''.join(children)}{close_tag}"

        pad = " " * (options.indent * depth)
        if not children:
            return f"{pad}{open_tag}{text}{close_tag}"
        return "\n".join([f"{pad}{open_tag}{text}", *children, f"{pad}{close_tag}"])


def _format_attributes(element: Element) -> str:
    pairs: list[tuple[str, str | None]] = sorted(element.attributes.items())
    if element.class_name:
        pairs.insert(0, ("class", element.class_name))
    if element.disabled:
        pairs.append(("disabled", None))
    rendered = [
        f' {name}="{html.escape(value, quote=True)}"' if value is not None else f" {name}"
        for name, value in pairs
    ]
    return "".join(rendered)


__all__ = ["HtmlRenderer", "RenderOptions"]
