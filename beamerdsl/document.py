"""Document assembler - a complete beamer presentation.

Output order is fixed:
1. base preamble (document class, standard packages)
2. code listing package, only if some frame holds code
3. custom header (title, user packages, macros)
4. the ``document`` environment with all frames
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from beamerdsl.config import BeamerConfig
from beamerdsl.nodes import (
    MINTED,
    Code,
    Command,
    ContainingCommand,
    Environment,
    Frame,
    Header,
    Itemize,
    N,
    NewCommand,
    NodeKind,
    Package,
    RawText,
    TranslatableText,
)
from beamerdsl.renderer import Renderer

log = logging.getLogger(__name__)


class Beamer:
    """A beamer presentation.

    Body builder calls are forwarded to the held ``document`` environment.

    Usage:
        doc = Beamer(toctitle="Outline")
        doc.set_title("Builders", "Jane Doe")
        doc.section("Basics")
        with doc.frame("First") as frame:
            frame.append_text("some /emphasized/ text")
        latex = doc.render()
    """

    def __init__(
        self, toctitle: Optional[str] = None, config: Optional[BeamerConfig] = None
    ) -> None:
        self.toctitle = toctitle
        self.config = config or BeamerConfig()
        self.document = Environment("document")
        self.base_header = self._build_base_header()
        self.custom_header = Header()

    def _build_base_header(self) -> Header:
        header = Header()
        documentclass = header.command("documentclass", self.config.document_class)
        for option in self.config.class_options:
            documentclass.add_option(option)
        header.blankline()
        header.comment(" = standard packages for 21st-century LaTeX =")
        for package in self.config.packages:
            pkg = header.pkg(package.name)
            for option in package.options:
                pkg.add_option(option)
            if package.comment is not None:
                pkg.set_comment(package.comment)
        header.blankline()
        header.comment(" = additional configuration =")

        if self.toctitle is not None:
            # Outline slide at the start of every section
            with header.containing_command("AtBeginSection") as at_begin:
                with at_begin.environment("frame", self.toctitle) as frame:
                    frame.command("tableofcontents").add_option("currentsection")
        return header

    # Custom header

    def head(self, init: Optional[Callable[[Header], object]] = None) -> Header:
        if init is not None:
            init(self.custom_header)
        return self.custom_header

    def pkg(
        self, name: str, init: Optional[Callable[[Package], object]] = None
    ) -> Package:
        return self.custom_header.pkg(name, init)

    def newcommand(
        self,
        name: str,
        n_args: int,
        init: Optional[Callable[[NewCommand], object]] = None,
    ) -> NewCommand:
        return self.custom_header.newcommand(name, n_args, init)

    def set_title(
        self,
        title: str,
        author: str,
        date: Optional[str] = None,
        subtitle: Optional[str] = None,
    ) -> None:
        """Declare title metadata and open the talk with title and outline frames."""
        head = self.custom_header
        head.command("title", title)
        head.command("author", author)
        if date is not None:
            head.command("date", date)
        else:
            head.containing_command("date").command("today")
        if subtitle is not None:
            head.command("subtitle", subtitle)

        outline = self.insert_content(Frame(title))
        outline.command("tableofcontents").add_option("hideallsubsections")
        self.insert_content(Frame()).command("titlepage")

    # Body

    def frame(
        self, title: Optional[str] = None, init: Optional[Callable[[Frame], object]] = None
    ) -> Frame:
        return self.document.add_content(Frame(title), init)

    def add_content(self, node: N, init: Optional[Callable[[N], object]] = None) -> N:
        return self.document.add_content(node, init)

    def insert_content(
        self, node: N, init: Optional[Callable[[N], object]] = None
    ) -> N:
        return self.document.insert_content(node, init)

    def has(self, kind: NodeKind) -> bool:
        return self.document.has(kind)

    def append_text(self, text: str, slide: Optional[int] = None) -> TranslatableText:
        return self.document.append_text(text, slide)

    def comment(self, comment: str) -> RawText:
        return self.document.comment(comment)

    def blankline(self) -> RawText:
        return self.document.blankline()

    def command(
        self, name: str, *args: str, init: Optional[Callable[[Command], object]] = None
    ) -> Command:
        return self.document.command(name, *args, init=init)

    def containing_command(
        self, name: str, init: Optional[Callable[[ContainingCommand], object]] = None
    ) -> ContainingCommand:
        return self.document.containing_command(name, init)

    def section(self, name: Optional[str] = None, sub: Optional[str] = None) -> None:
        self.document.section(name, sub)

    def environment(
        self,
        name: str,
        *args: str,
        init: Optional[Callable[[Environment], object]] = None,
    ) -> Environment:
        return self.document.environment(name, *args, init=init)

    def center(
        self, init: Optional[Callable[[Environment], object]] = None
    ) -> Environment:
        return self.document.center(init)

    def itemize(self, init: Optional[Callable[[Itemize], object]] = None) -> Itemize:
        return self.document.itemize(init)

    # Output

    def render(self) -> str:
        """Render the complete LaTeX source of the presentation."""
        renderer = Renderer(self.config.indent)
        parts = [renderer.render(self.base_header)]
        if self.document.has(NodeKind.CODE):
            log.debug("Code found, adding %s to preamble", MINTED)
            code_header = Code.header(self.config.code_package_comment)
            parts.append(renderer.render(code_header))
        parts.append(renderer.render(self.custom_header))
        parts.append("\n")
        parts.append(renderer.render(self.document))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


def beamer(
    toctitle: Optional[str] = None,
    init: Optional[Callable[[Beamer], object]] = None,
    config: Optional[BeamerConfig] = None,
) -> Beamer:
    """Create a presentation and run ``init`` on it.

    Examples:
        doc = beamer("Outline", lambda d: d.frame("Hello").append_text("world"))
    """
    doc = Beamer(toctitle, config)
    if init is not None:
        init(doc)
    return doc
