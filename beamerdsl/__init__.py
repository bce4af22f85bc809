"""beamerdsl - build beamer presentations from Python.

Builders assemble a tree of LaTeX nodes; the renderer turns it into text.
"""

from beamerdsl._version import __version__
from beamerdsl.config import BeamerConfig, PackageConfig
from beamerdsl.document import Beamer, beamer
from beamerdsl.exceptions import BeamerDslError, ConfigError, OwnershipError
from beamerdsl.markup import on_slide, slide_range, translate
from beamerdsl.nodes import (
    Arguments,
    Block,
    Code,
    Command,
    Container,
    ContainingCommand,
    Environment,
    Frame,
    Header,
    Itemize,
    NewCommand,
    Node,
    NodeKind,
    Package,
    RawText,
    TranslatableText,
)
from beamerdsl.renderer import Renderer
from beamerdsl.utils import setup_logging

__all__ = [
    "__version__",
    # Document
    "Beamer",
    "beamer",
    "BeamerConfig",
    "PackageConfig",
    # Tree
    "Node",
    "NodeKind",
    "Container",
    "RawText",
    "TranslatableText",
    "Arguments",
    "Command",
    "Package",
    "ContainingCommand",
    "NewCommand",
    "Environment",
    "Itemize",
    "Block",
    "Code",
    "Frame",
    "Header",
    # Rendering
    "Renderer",
    "translate",
    "on_slide",
    "slide_range",
    # Errors
    "BeamerDslError",
    "OwnershipError",
    "ConfigError",
    "setup_logging",
]
