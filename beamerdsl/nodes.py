"""Document tree - the nodes a presentation is built from.

Every node carries an explicit ``kind`` so the tree can be searched and
rendered structurally. Containers expose builder methods that create,
append and return typed children:

    frame = Frame("Intro")
    with frame.itemize() as items:
        items.append_text("first point")
        items.append_text("shown from slide 2", slide=2)

The returned child can be configured right away, through the optional
``init`` callable or as a context manager.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, List, Optional, TypeVar

from beamerdsl.exceptions import OwnershipError
from beamerdsl.markup import on_slide, slide_range

N = TypeVar("N", bound="Node")
W = TypeVar("W", bound="WithArguments")

# Code listings: package and environment share this name
MINTED = "minted"


class NodeKind(str, Enum):
    """Discriminator for every node type."""

    RAW = "raw"
    TEXT = "text"
    COMMAND = "command"
    PACKAGE = "package"
    CONTAINING_COMMAND = "containing_command"
    NEW_COMMAND = "new_command"
    ENVIRONMENT = "environment"
    ITEMIZE = "itemize"
    FRAME = "frame"
    BLOCK = "block"
    CODE = "code"
    HEADER = "header"


class Node:
    """Base class for all nodes."""

    kind: NodeKind

    def __init__(self) -> None:
        self.parent: Optional[Container] = None
        # Only honored by commands, environments and blocks
        self.slides: Optional[int] = None

    def add_slide_qualifier(self: N, n: int) -> N:
        """Restrict this node to some slides of the frame.

        Positive ``n`` shows it from slide ``n`` on, negative ``n`` only
        at slide ``-n``.
        """
        self.slides = n
        return self

    def has(self, kind: NodeKind) -> bool:
        return False

    def __enter__(self: N) -> N:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def __str__(self) -> str:
        from beamerdsl.renderer import Renderer

        return Renderer().render(self)


class RawText(Node):
    """Text emitted as is, without indentation or markup rules."""

    kind = NodeKind.RAW

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def __repr__(self) -> str:
        return f"RawText({self.text!r})"


class TranslatableText(Node):
    """Text that goes through the markup rules when rendered."""

    kind = NodeKind.TEXT

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def __repr__(self) -> str:
        return f"TranslatableText({self.text!r})"


@dataclass
class Arguments:
    """Required arguments ``{...}``, optional arguments ``[...]`` and comment."""

    args: List[str] = field(default_factory=list)
    opt_args: List[str] = field(default_factory=list)
    comment: Optional[str] = None

    def add_option(self, option: str) -> None:
        self.opt_args.append(option)

    def set_comment(self, comment: str) -> None:
        self.comment = comment


class WithArguments:
    """Forwards argument handling to the held ``arguments``."""

    arguments: Arguments

    @property
    def args(self) -> List[str]:
        return self.arguments.args

    @property
    def opt_args(self) -> List[str]:
        return self.arguments.opt_args

    @property
    def inline_comment(self) -> Optional[str]:
        return self.arguments.comment

    def add_option(self: W, option: str) -> W:
        self.arguments.add_option(option)
        return self

    def set_comment(self: W, comment: str) -> W:
        self.arguments.set_comment(comment)
        return self


class Container(Node):
    """Node holding an ordered list of children."""

    def __init__(self) -> None:
        super().__init__()
        self._contents: List[Node] = []

    @property
    def contents(self) -> tuple[Node, ...]:
        return tuple(self._contents)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def has(self, kind: NodeKind) -> bool:
        """Check whether a node of ``kind`` exists anywhere below this one."""
        for node in self._contents:
            if node.kind is kind or node.has(kind):
                return True
        return False

    def add_content(self, node: N, init: Optional[Callable[[N], object]] = None) -> N:
        """Append ``node`` after running ``init`` on it, and return it."""
        self._adopt(node, init)
        self._contents.append(node)
        return node

    def insert_content(
        self, node: N, init: Optional[Callable[[N], object]] = None
    ) -> N:
        """Like :meth:`add_content`, but put ``node`` before all other children."""
        self._adopt(node, init)
        self._contents.insert(0, node)
        return node

    def _adopt(self, node: Node, init: Optional[Callable]) -> None:
        if node.parent is not None:
            raise OwnershipError(node, node.parent)
        if init is not None:
            init(node)
            # init may have attached the node elsewhere
            if node.parent is not None:
                raise OwnershipError(node, node.parent)
        node.parent = self

    # Text

    def append_text(self, text: str, slide: Optional[int] = None) -> TranslatableText:
        if slide is None:
            return self.add_content(TranslatableText(f"{text}\n"))
        return self.add_content(TranslatableText(f"{on_slide(slide)}{{{text}}}\n"))

    def comment(self, comment: str) -> RawText:
        return self.add_content(RawText(f"%{comment}\n"))

    def blankline(self) -> RawText:
        return self.add_content(RawText("\n"))

    # Commands

    def command(
        self, name: str, *args: str, init: Optional[Callable[[Command], object]] = None
    ) -> Command:
        return self.add_content(Command(name, *args), init)

    def containing_command(
        self, name: str, init: Optional[Callable[[ContainingCommand], object]] = None
    ) -> ContainingCommand:
        return self.add_content(ContainingCommand(name), init)

    def section(self, name: Optional[str] = None, sub: Optional[str] = None) -> None:
        if name is not None:
            self.add_content(Command("section", name))
        if sub is not None:
            self.add_content(Command("subsection", sub))

    # Environments

    def environment(
        self,
        name: str,
        *args: str,
        init: Optional[Callable[[Environment], object]] = None,
    ) -> Environment:
        return self.add_content(Environment(name, *args), init)

    def center(
        self, init: Optional[Callable[[Environment], object]] = None
    ) -> Environment:
        return self.add_content(Environment("center"), init)

    def itemize(self, init: Optional[Callable[[Itemize], object]] = None) -> Itemize:
        return self.add_content(Itemize(), init)


class Command(WithArguments, Node):
    """A macro: ``\\name[opt, ...]{arg}{arg} % comment``."""

    kind = NodeKind.COMMAND

    def __init__(self, name: str, *args: str) -> None:
        super().__init__()
        self.name = name
        self.arguments = Arguments(list(args))

    def __repr__(self) -> str:
        return f"Command({self.name!r})"


class Package(Command):
    """``\\usepackage{name}`` line of a header."""

    kind = NodeKind.PACKAGE

    def __init__(self, name: str) -> None:
        super().__init__("usepackage", name)


class ContainingCommand(WithArguments, Container):
    """A macro whose braced argument spans several lines of content."""

    kind = NodeKind.CONTAINING_COMMAND

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name
        self.arguments = Arguments()


class NewCommand(Container):
    """``\\newcommand\\name[n]{...}`` definition."""

    kind = NodeKind.NEW_COMMAND

    def __init__(self, name: str, n_args: int) -> None:
        super().__init__()
        self.name = name
        self.n_args = n_args


class Environment(WithArguments, Container):
    """A ``\\begin{name}...\\end{name}`` pair around its children."""

    kind = NodeKind.ENVIRONMENT

    def __init__(self, name: str, *args: str) -> None:
        super().__init__()
        self.name = name
        self.arguments = Arguments(list(args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {len(self)} children)"


class Itemize(Environment):
    """List environment where each text becomes an ``\\item``."""

    kind = NodeKind.ITEMIZE

    def __init__(self) -> None:
        super().__init__("itemize")

    def append_text(self, text: str, slide: Optional[int] = None) -> TranslatableText:
        if slide is None:
            return self.add_content(TranslatableText(f"\\item {text}\n"))
        return self.add_content(
            TranslatableText(f"\\item{slide_range(slide)} {text}\n")
        )


class Block(Container):
    """Beamer ``block`` with a title."""

    kind = NodeKind.BLOCK

    def __init__(self, title: str = "") -> None:
        super().__init__()
        self.title = title


class Code(Block):
    """Block showing source code through a ``minted`` environment.

    The block title defaults to the language name.
    """

    kind = NodeKind.CODE

    def __init__(self, language: str, block_title: Optional[str] = None) -> None:
        super().__init__(language if block_title is None else block_title)
        self.language = language
        self.minted = self.add_content(Environment(MINTED, language))

    def add_source(self, code: str) -> Code:
        """Append verbatim source, stripped of surrounding blank space."""
        self.minted.add_content(RawText(code.strip() + "\n"))
        return self

    @staticmethod
    def header(comment: Optional[str] = "to include source code") -> Header:
        """Preamble needed by documents that contain code blocks."""
        header = Header()
        pkg = header.pkg(MINTED)
        if comment is not None:
            pkg.set_comment(comment)
        return header


class Frame(Environment):
    """A slide.

    Frames holding code are rendered with the ``fragile`` option.
    """

    kind = NodeKind.FRAME

    def __init__(self, title: Optional[str] = None) -> None:
        super().__init__("frame")
        if title is not None:
            self.arguments.args.append(title)

    def pause(self) -> Command:
        return self.add_content(Command("pause"))

    def code(self, language: str, block_title: Optional[str] = None) -> Code:
        return self.add_content(Code(language, block_title))

    def block(
        self, title: str = "", init: Optional[Callable[[Block], object]] = None
    ) -> Block:
        return self.add_content(Block(title), init)


class Header(Container):
    """Preamble section: packages, macro definitions, settings."""

    kind = NodeKind.HEADER

    def pkg(
        self, name: str, init: Optional[Callable[[Package], object]] = None
    ) -> Package:
        return self.add_content(Package(name), init)

    def newcommand(
        self,
        name: str,
        n_args: int,
        init: Optional[Callable[[NewCommand], object]] = None,
    ) -> NewCommand:
        return self.add_content(NewCommand(name, n_args), init)
