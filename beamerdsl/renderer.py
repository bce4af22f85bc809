"""Renderer - converts a document tree to LaTeX text."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from beamerdsl.markup import on_slide, slide_range, translate
from beamerdsl.nodes import (
    Block,
    Command,
    Container,
    ContainingCommand,
    Environment,
    NewCommand,
    Node,
    NodeKind,
    RawText,
    TranslatableText,
)

log = logging.getLogger(__name__)

DEFAULT_INDENT = "  "
FRAGILE = "fragile"


class Renderer:
    """Renders a node tree depth-first, one indent step per nesting level."""

    def __init__(self, indent: str = DEFAULT_INDENT) -> None:
        self.indent = indent
        self._handlers: Dict[NodeKind, Callable[[Node, List[str], str], None]] = {
            NodeKind.RAW: self._render_raw,
            NodeKind.TEXT: self._render_text,
            NodeKind.COMMAND: self._render_command,
            NodeKind.PACKAGE: self._render_command,
            NodeKind.CONTAINING_COMMAND: self._render_containing_command,
            NodeKind.NEW_COMMAND: self._render_new_command,
            NodeKind.ENVIRONMENT: self._render_environment,
            NodeKind.ITEMIZE: self._render_environment,
            NodeKind.FRAME: self._render_environment,
            NodeKind.BLOCK: self._render_block,
            NodeKind.CODE: self._render_block,
            NodeKind.HEADER: self._render_children,
        }

    def render(self, node: Node) -> str:
        """Render a node and everything below it.

        Args:
            node: Root of the tree to render.

        Returns:
            LaTeX text. Rendering does not modify the tree, so rendering the
            same tree twice gives the same text.
        """
        log.debug("Rendering %s tree", node.kind.value)
        out: List[str] = []
        self._render(node, out, "")
        return "".join(out)

    def _render(self, node: Node, out: List[str], indent: str) -> None:
        self._handlers[node.kind](node, out, indent)

    def _render_children(self, node: Container, out: List[str], indent: str) -> None:
        for child in node:
            self._render(child, out, indent)

    def _render_raw(self, node: RawText, out: List[str], indent: str) -> None:
        # Never indented: used for verbatim content
        out.append(node.text)

    def _render_text(self, node: TranslatableText, out: List[str], indent: str) -> None:
        out.append(indent + translate(node.text))

    def _render_command(self, node: Command, out: List[str], indent: str) -> None:
        out.append(indent)
        if node.slides is not None:
            out.append(f"{on_slide(node.slides)}{{\n{indent}{self.indent}")
        out.append(f"\\{node.name}")
        out.append(_options(node.opt_args))
        if node.args:
            out.append("{" + "}{".join(node.args) + "}")
        if node.slides is not None:
            out.append(f"\n{indent}}}")
        if node.inline_comment is not None:
            out.append(f" % {node.inline_comment}")
        out.append("\n")

    def _render_containing_command(
        self, node: ContainingCommand, out: List[str], indent: str
    ) -> None:
        if node.inline_comment is not None:
            out.append(f" % {node.inline_comment}\n")
        out.append(f"{indent}\\{node.name}{_options(node.opt_args)}{{\n")
        self._render_children(node, out, indent + self.indent)
        out.append("}\n")

    def _render_new_command(self, node: NewCommand, out: List[str], indent: str) -> None:
        out.append(f"{indent}\\newcommand\\{node.name}[{node.n_args}]{{\n")
        self._render_children(node, out, indent + self.indent)
        out.append("}\n")

    def _render_environment(
        self, node: Environment, out: List[str], indent: str
    ) -> None:
        opt_args = list(node.opt_args)
        if (
            node.kind is NodeKind.FRAME
            and FRAGILE not in opt_args
            and node.has(NodeKind.CODE)
        ):
            opt_args.append(FRAGILE)

        # A qualified environment is wrapped in \onslide{...} and shifted
        inner = indent if node.slides is None else indent + self.indent
        if node.slides is not None:
            out.append(f"{indent}{on_slide(node.slides)}{{\n")
        out.append(f"{inner}\\begin{{{node.name}}}{_options(opt_args)}")
        if node.args:
            out.append("{" + ", ".join(node.args) + "}")
        if node.inline_comment is not None:
            out.append(f" % {node.inline_comment}")
        out.append("\n")
        self._render_children(node, out, inner + self.indent)
        out.append(f"{inner}\\end{{{node.name}}}\n")
        if node.slides is not None:
            out.append(f"{indent}}}\n")

    def _render_block(self, node: Block, out: List[str], indent: str) -> None:
        out.append(f"{indent}\\begin{{block}}")
        if node.slides is not None:
            out.append(slide_range(node.slides))
        out.append(f"{{{node.title}}}\n")
        self._render_children(node, out, indent + self.indent)
        out.append(f"{indent}\\end{{block}}\n")


def _options(opt_args: List[str]) -> str:
    if not opt_args:
        return ""
    return "[" + ", ".join(opt_args) + "]"
