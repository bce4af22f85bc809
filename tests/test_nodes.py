"""Tests for the document tree."""

import pytest

from beamerdsl.exceptions import OwnershipError
from beamerdsl.nodes import (
    Block,
    Code,
    Command,
    Environment,
    Frame,
    Header,
    Itemize,
    NodeKind,
    Package,
    RawText,
    TranslatableText,
)


def test_add_content_keeps_order():
    env = Environment("center")
    a = env.add_content(RawText("a"))
    b = env.add_content(RawText("b"))
    assert env.contents == (a, b)


def test_insert_content_goes_first():
    """Appending A, B then inserting C gives C, A, B."""
    env = Environment("center")
    a = env.add_content(RawText("a"))
    b = env.add_content(RawText("b"))
    c = env.insert_content(RawText("c"))
    assert env.contents == (c, a, b)


def test_add_content_runs_init_and_returns_node():
    env = Environment("center")
    seen = []

    def init(cmd):
        seen.append(cmd.parent)
        cmd.add_option("x")

    cmd = env.add_content(Command("foo"), init)
    assert seen == [None]
    assert cmd.opt_args == ["x"]
    assert cmd.parent is env


def test_node_has_single_parent():
    first = Environment("a")
    second = Environment("b")
    node = first.add_content(RawText("x"))

    with pytest.raises(OwnershipError):
        second.add_content(node)
    with pytest.raises(OwnershipError):
        second.insert_content(node)
    assert len(second) == 0
    assert node.parent is first


def test_has_searches_nested_containers():
    frame = Frame("t")
    with frame.center() as center:
        with center.itemize() as items:
            items.append_text("deep")

    assert frame.has(NodeKind.ITEMIZE)
    assert frame.has(NodeKind.TEXT)
    assert frame.has(NodeKind.ENVIRONMENT)
    assert not frame.has(NodeKind.CODE)
    assert not frame.has(NodeKind.BLOCK)


def test_has_matches_exact_kind():
    """An itemize is not reported as a plain environment."""
    frame = Frame()
    frame.itemize()
    assert frame.has(NodeKind.ITEMIZE)
    assert not frame.has(NodeKind.ENVIRONMENT)


def test_has_on_leaf_is_false():
    assert not RawText("x").has(NodeKind.RAW)


def test_append_text_adds_newline():
    env = Environment("center")
    text = env.append_text("hello")
    assert isinstance(text, TranslatableText)
    assert text.text == "hello\n"


def test_append_text_on_slide():
    env = Environment("center")
    assert env.append_text("later", slide=2).text == "\\onslide<2->{later}\n"
    assert env.append_text("once", slide=-2).text == "\\only<2>{once}\n"


def test_itemize_append_text_makes_items():
    items = Itemize()
    assert items.append_text("a").text == "\\item a\n"
    assert items.append_text("b", slide=2).text == "\\item<2-> b\n"
    assert items.append_text("c", slide=-3).text == "\\item<only@3> c\n"


def test_comment_and_blankline_are_raw():
    env = Environment("center")
    comment = env.comment(" note")
    blank = env.blankline()
    assert isinstance(comment, RawText)
    assert comment.text == "% note\n"
    assert blank.text == "\n"


def test_section_and_subsection():
    env = Environment("document")
    env.section("Intro", sub="Motivation")
    names = [(c.name, c.args) for c in env]
    assert names == [("section", ["Intro"]), ("subsection", ["Motivation"])]


def test_section_only_subsection():
    env = Environment("document")
    env.section(sub="Details")
    assert [c.name for c in env] == ["subsection"]


def test_command_forwards_arguments():
    cmd = Command("usepackage", "nag")
    assert cmd.add_option("l2tabu") is cmd
    assert cmd.set_comment("why") is cmd
    assert cmd.args == ["nag"]
    assert cmd.opt_args == ["l2tabu"]
    assert cmd.inline_comment == "why"
    assert cmd.arguments.opt_args == ["l2tabu"]


def test_add_slide_qualifier_returns_node():
    env = Environment("center")
    assert env.add_slide_qualifier(-1) is env
    assert env.slides == -1


def test_frame_title_is_argument():
    assert Frame("Title").args == ["Title"]
    assert Frame().args == []


def test_frame_builders():
    frame = Frame()
    pause = frame.pause()
    block = frame.block("Note", lambda b: b.append_text("x"))
    code = frame.code("python")
    assert pause.name == "pause"
    assert isinstance(block, Block)
    assert block.title == "Note"
    assert len(block) == 1
    assert code.kind is NodeKind.CODE
    assert frame.contents == (pause, block, code)


def test_code_block_title_defaults_to_language():
    assert Code("kotlin").title == "kotlin"
    assert Code("kotlin", "Example").title == "Example"


def test_code_add_source_strips_and_is_raw():
    code = Code("python").add_source("\n    print(1)\n\n")
    assert code.minted.args == ["python"]
    (source,) = code.minted.contents
    assert isinstance(source, RawText)
    assert source.text == "print(1)\n"


def test_header_builders():
    header = Header()
    pkg = header.pkg("tikz", lambda p: p.add_option("draft"))
    new = header.newcommand("half", 1, lambda n: n.append_text("#1/2"))
    assert isinstance(pkg, Package)
    assert pkg.name == "usepackage"
    assert pkg.args == ["tikz"]
    assert pkg.opt_args == ["draft"]
    assert new.n_args == 1
    assert header.has(NodeKind.PACKAGE)
    assert header.has(NodeKind.NEW_COMMAND)


def test_context_manager_returns_node():
    frame = Frame()
    with frame.itemize() as items:
        assert isinstance(items, Itemize)
        items.append_text("a")
    assert len(items) == 1


def test_comment_on_frame_and_environment():
    """Argument nodes still expose the comment builder."""
    frame = Frame("t")
    frame.set_comment("inline")
    line = frame.comment(" todo")
    assert isinstance(line, RawText)
    assert line.text == "% todo\n"
    assert frame.inline_comment == "inline"
    assert frame.contents == (line,)

    items = Itemize()
    assert items.comment(" x").text == "% x\n"


def test_init_attaching_node_elsewhere_raises():
    """A node attached by its own init is not added a second time."""
    first = Environment("a")
    second = Environment("b")
    node = RawText("x")

    with pytest.raises(OwnershipError):
        second.add_content(node, lambda n: first.add_content(n))
    assert first.contents == (node,)
    assert second.contents == ()
    assert node.parent is first


def test_code_uses_minted_for_package_and_environment():
    code = Code("python")
    (pkg,) = Code.header().contents
    assert code.minted.name == "minted"
    assert pkg.args == ["minted"]
    assert pkg.inline_comment == "to include source code"
    (bare,) = Code.header(None).contents
    assert bare.inline_comment is None
