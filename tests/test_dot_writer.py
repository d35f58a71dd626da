import io

from ymbase.dot_writer import DotWriter


def _writer():
    buf = io.StringIO()
    return DotWriter(buf), buf


def test_edge_with_attribute():
    w, buf = _writer()
    w.write_edge("a", "b", {"color": "red"})
    assert buf.getvalue() == "  a -> b [color = red]\n"


def test_rank_group():
    w, buf = _writer()
    w.write_rank_group(["a", "b"], "same")
    assert buf.getvalue() == "  { rank = same; a; b;}\n"


def test_node_without_attributes_has_no_line_end():
    w, buf = _writer()
    w.write_node("n1")
    assert buf.getvalue() == "  n1"


def test_attributes_keep_their_order():
    w, buf = _writer()
    w.write_node("n1", {"x": "1", "y": "2"})
    text = buf.getvalue()
    assert text.index("x = 1") < text.index("y = 2")
    assert ", " in text
    assert text.endswith("]\n")


def test_whole_graph():
    w, buf = _writer()
    w.graph_begin("digraph", "G", {"rankdir": "LR"})
    w.write_node("a", {"shape": "box"})
    w.write_edge("a", "b", {"label": "e"})
    w.graph_end()
    lines = buf.getvalue().splitlines()
    assert lines[0] == "digraph G {"
    assert lines[1].startswith("  graph [")
    assert "rankdir = LR" in lines[1]
    assert lines[-1] == "}"
    assert len(lines) == 5