DEFAULTS = {
    # Graph kind used by GraphBuilder when none is given
    "GRAPH_DEFAULT_KIND": "undirected-graph",
    # Weight given to arcs inserted without one
    "GRAPH_DEFAULT_WEIGHT": 0.0,
    # Prefix for generated vertex labels (V1, V2, ...)
    "GRAPH_LABEL_PREFIX": "V",
    # Number of the first generated label
    "GRAPH_LABEL_START": 1,
}
