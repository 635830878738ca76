import logging

import numpy as np
import pandas as pd
import pytest

from matrixgraph.config.settings import GraphSettings, MatrixGraphConfig
from matrixgraph.graph.graph_builder import GraphBuilder, create_graph
from matrixgraph.graph.graph_schema import Arc, GraphKind, GraphKindError

from conftest import DN_4, UDG_5


def test_from_nested_lists_uses_default_labels():
    graph = GraphBuilder.from_weight_matrix(UDG_5, kind="UDG")

    assert graph.vertices() == ["V1", "V2", "V3", "V4", "V5"]
    assert graph.edge_count() == 6


def test_from_numpy_array_keeps_network_weights():
    graph = GraphBuilder.from_weight_matrix(
        np.array(DN_4), kind=GraphKind.DIRECTED_NETWORK
    )

    assert graph.get_arc("V3", "V4").weight == 13
    assert graph.edge_count() == 4


def test_from_dataframe_takes_labels_from_index():
    names = ["a", "b", "c", "d"]
    frame = pd.DataFrame(DN_4, index=names, columns=names)

    graph = GraphBuilder.from_weight_matrix(frame, kind="directed-network")

    assert graph.vertices() == names
    assert graph.get_arc("d", "a") == Arc("d", "a", 14)


def test_explicit_labels_override_defaults():
    graph = GraphBuilder.from_weight_matrix(
        [[0, 1], [0, 0]], kind="DG", labels=["x", "y"]
    )

    assert graph.has_arc("x", "y")
    assert not graph.has_arc("y", "x")


def test_config_controls_default_kind_and_labels():
    config = MatrixGraphConfig(
        graph=GraphSettings(
            default_kind=GraphKind.DIRECTED_GRAPH,
            label_prefix="N",
            label_start=0,
        )
    )

    graph = GraphBuilder.from_weight_matrix([[0, 1], [0, 0]], config=config)

    assert graph.kind is GraphKind.DIRECTED_GRAPH
    assert graph.vertices() == ["N0", "N1"]


@pytest.mark.parametrize(
    "matrix",
    [
        [[0, 1, 0], [1, 0, 1]],
        [0, 1, 1],
        np.zeros((2, 2, 2)),
    ],
)
def test_rejects_non_square_matrix(matrix):
    with pytest.raises(ValueError, match="square"):
        GraphBuilder.from_weight_matrix(matrix, kind="UDG")


def test_rejects_bad_labels():
    with pytest.raises(ValueError, match="expected 2 labels"):
        GraphBuilder.from_weight_matrix([[0, 1], [1, 0]], kind="UDG", labels=["a"])

    with pytest.raises(ValueError, match="unique"):
        GraphBuilder.from_weight_matrix(
            [[0, 1], [1, 0]], kind="UDG", labels=["a", "a"]
        )


def test_rejects_unknown_kind():
    with pytest.raises(GraphKindError):
        GraphBuilder.from_weight_matrix(UDG_5, kind="hypergraph")


def test_add_vertices_and_arcs_report_applied_counts():
    config = MatrixGraphConfig(graph=GraphSettings(default_weight=2.5))
    graph = create_graph(GraphKind.DIRECTED_NETWORK)
    builder = GraphBuilder(graph, config)

    assert builder.add_vertices(["a", "b", "a", "c"]) == 3

    applied = builder.add_arcs(
        [
            ("a", "b"),
            ("b", "c", 7),
            Arc("c", "a", 1.5),
            ("a", "zz", 1),
        ]
    )

    assert applied == 3
    assert graph.get_arc("a", "b").weight == 2.5
    assert graph.get_arc("b", "c").weight == 7
    assert graph.get_arc("c", "a").weight == 1.5


def test_from_weight_matrix_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="matrixgraph.builder"):
        GraphBuilder.from_weight_matrix(UDG_5, kind="UDG")

    assert any(
        "built UDG graph: vertices=5 edges=6" in record.getMessage()
        for record in caplog.records
    )
