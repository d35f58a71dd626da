"""Writing graphs in the Graphviz ``dot`` language."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, TextIO


class DotWriter:
    """Writes graph, node, edge and rank definitions to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def graph_begin(
        self,
        graph_type: str,
        graph_name: str,
        attr_list: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Open a graph definition, with graph-wide attributes."""
        self._stream.write(f"{graph_type} {graph_name} {{\n  graph")
        self._write_attr(attr_list)

    def graph_end(self) -> None:
        """Close the graph definition."""
        self._stream.write("}\n")

    def write_node(
        self, node: str, attr_list: Optional[Mapping[str, str]] = None
    ) -> None:
        """Define a node."""
        self._stream.write(f"  {node}")
        self._write_attr(attr_list)

    def write_edge(
        self,
        from_node: str,
        to_node: str,
        attr_list: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Define an edge between two nodes."""
        self._stream.write(f"  {from_node} -> {to_node}")
        self._write_attr(attr_list)

    def write_rank_group(self, node_list: Iterable[str], rank: str) -> None:
        """Put the nodes into one rank group."""
        nodes = "".join(f" {node};" for node in node_list)
        self._stream.write(f"  {{ rank = {rank};{nodes}}}\n")

    def _write_attr(self, attr_list: Optional[Mapping[str, str]]) -> None:
        if not attr_list:
            return
        body = ", ".join(f"{name} = {value}" for name, value in attr_list.items())
        self._stream.write(f" [{body}]\n")