"""
Declarative construction of graphs.

GraphBuilder records node and edge declarations and replays them, in order,
through the public insertion methods of a fresh Graph.
"""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from ..classes.types import DataFactory
from .graph import Graph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Fluent recorder of graph construction steps.

    >>> g = GraphBuilder().path(0, 1, 2).edge(2, 3).build()
    >>> sorted(g.edge_tuples())
    [(0, 1), (1, 2), (2, 3), (3, 2)]
    """

    def __init__(self, data_factory: Optional[DataFactory] = None,
                 logger: Optional[logging.Logger] = None):
        self.data_factory = data_factory
        self.logger = logger
        self._steps: List[Tuple[Callable[..., Any], Tuple]] = []

    def node(self, node_id, *args) -> 'GraphBuilder':
        """
        Declare a node, optionally with a payload.

        Args:
            node_id: Identifier of the node
            *args: At most one payload; without it the default payload is used
        """
        if len(args) > 1:
            raise TypeError(f"node() takes at most one payload, got {len(args)}")
        if args:
            self._steps.append((Graph.add_node_with_data, (node_id, args[0])))
        else:
            self._steps.append((Graph.add_node, (node_id,)))
        return self

    def directed_edge(self, from_id, to_id) -> 'GraphBuilder':
        """Declare a directed edge from_id -> to_id."""
        self._steps.append((Graph.add_directed_edge, (from_id, to_id)))
        return self

    def edge(self, from_id, to_id) -> 'GraphBuilder':
        """Declare an undirected edge."""
        self._steps.append((Graph.add_edge, (from_id, to_id)))
        return self

    def path(self, *node_ids, directed: bool = True) -> 'GraphBuilder':
        """Declare edges between consecutive nodes of a sequence."""
        for from_id, to_id in zip(node_ids, node_ids[1:]):
            if directed:
                self.directed_edge(from_id, to_id)
            else:
                self.edge(from_id, to_id)
        return self

    def adjacency(self, mapping: Mapping[Any, Iterable], directed: bool = True) -> 'GraphBuilder':
        """
        Declare edges from an adjacency mapping.

        Args:
            mapping: Node ID -> iterable of neighbour IDs, walked in mapping order
            directed: Declare directed edges if True, undirected edges otherwise
        """
        for from_id, targets in mapping.items():
            targets = list(targets)
            if not targets:
                self.node(from_id)
            for to_id in targets:
                if directed:
                    self.directed_edge(from_id, to_id)
                else:
                    self.edge(from_id, to_id)
        return self

    def build(self) -> Graph:
        """
        Replay every declaration onto a new graph.

        The builder can be built repeatedly; each call returns an independent graph.
        """
        graph = Graph(self.data_factory, self.logger)
        for operation, args in self._steps:
            operation(graph, *args)
        logger.debug(f"Built {graph!r} from {len(self._steps)} declarations")
        return graph

    def __len__(self) -> int:
        return len(self._steps)
