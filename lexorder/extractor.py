import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from lexorder.core.digraph import DirectedGraph


@dataclass
class ColumnScan:
    """State carried while walking one column of the left-aligned word table."""
    column: int
    prev_letter: Optional[str] = None
    curr_letter: Optional[str] = None
    prev_prefix: Optional[str] = None
    entries: int = 0

    def feed(self, word: str, graph: DirectedGraph) -> None:
        """Advance the scan by one word that has a letter in this column."""
        letter = word[self.column]
        prefix = word[:self.column]
        self.prev_letter, self.curr_letter = self.curr_letter, letter
        self.entries += 1

        if self.prev_letter is not None and self.prev_letter != letter and self.prev_prefix == prefix:
            if not graph.has_edge(self.prev_letter, letter):
                logging.debug(
                    f"Column {self.column}: {self.prev_letter!r} precedes {letter!r}",
                    extra={"column": self.column, "letters": [self.prev_letter, letter]},
                )
            graph.add_edge(self.prev_letter, letter)

        self.prev_prefix = prefix


def extract_constraints(words: Sequence[str]) -> DirectedGraph:
    """Build the letter precedence graph for a sorted dictionary.

    Words are read as rows of a left-aligned table. Within a column, two
    letters on consecutive non-empty rows are comparable only when both rows
    agree on everything to the left of that column; the first differing
    letter of two such rows gives an edge earlier -> later.

    Every letter in the dictionary becomes a vertex, even when no constraint
    mentions it.
    """
    graph: DirectedGraph = DirectedGraph()
    for word in words:
        for letter in word:
            graph.add_vertex(letter)

    column = 0
    while True:
        scan = ColumnScan(column)
        for word in words:
            if len(word) > column:
                scan.feed(word, graph)
        # A column with fewer than two letters has nothing left to compare
        if scan.entries < 2:
            break
        column += 1

    logging.debug(
        f"Scanned {column + 1} columns of {len(words)} words: "
        f"{graph.vertex_count()} letters, {graph.edge_count()} constraints",
        extra={"word_count": len(words)},
    )
    return graph
