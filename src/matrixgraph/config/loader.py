from __future__ import annotations

from dynaconf import Dynaconf

from matrixgraph.config.constants import DEFAULTS
from matrixgraph.config.settings import GraphSettings, MatrixGraphConfig
from matrixgraph.graph.graph_schema import GraphKind


def _build_settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="MATRIXGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def load_settings(settings: Dynaconf | None = None) -> MatrixGraphConfig:
    """
    Build a MatrixGraphConfig from MATRIXGRAPH_* environment variables,
    falling back to DEFAULTS.

    An invalid GRAPH_DEFAULT_KIND raises GraphKindError.
    """
    if settings is None:
        settings = _build_settings()

    return MatrixGraphConfig(
        graph=GraphSettings(
            default_kind=GraphKind.coerce(
                settings.get("GRAPH_DEFAULT_KIND", DEFAULTS["GRAPH_DEFAULT_KIND"])
            ),
            default_weight=float(
                settings.get("GRAPH_DEFAULT_WEIGHT", DEFAULTS["GRAPH_DEFAULT_WEIGHT"])
            ),
            label_prefix=str(
                settings.get("GRAPH_LABEL_PREFIX", DEFAULTS["GRAPH_LABEL_PREFIX"])
            ),
            label_start=int(
                settings.get("GRAPH_LABEL_START", DEFAULTS["GRAPH_LABEL_START"])
            ),
        )
    )
