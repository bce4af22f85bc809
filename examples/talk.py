"""Example: print the LaTeX source of a short talk."""

from beamerdsl import beamer, setup_logging

setup_logging(verbose=True)


def build(doc):
    doc.set_title("Type-safe builders", "Jane Doe", subtitle="a short tour")
    doc.pkg("babel", lambda p: p.add_option("english"))
    doc.newcommand("half", 1, lambda n: n.append_text("\\frac{#1}{2}"))

    doc.section("Builders")
    with doc.frame("Why builders?") as frame:
        with frame.itemize() as items:
            items.append_text("nested /structure/ mirrors the output")
            items.append_text("names like |frame| read naturally", slide=2)
            items.append_text("only on the third slide...", slide=-3)
        frame.pause()
        frame.block("Remember", lambda b: b.append_text("rendering is pure"))

    doc.section("Code")
    with doc.frame("A listing") as frame:
        frame.code("python", "Hello").add_source(
            """
            print("hello")
            """
        )


print(beamer("Outline", build).render())
