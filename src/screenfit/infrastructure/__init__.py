"""Infrastructure layer - rendering, exporters and formatters."""

from .diagram_renderer import DiagramRenderer
from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonPlanExporter,
    StlSceneExporter,
    SvgExporter,
)
from .formatters import PlanSummaryFormatter
from .stl_exporter import SceneStlExporter, StlMeshBuilder

__all__ = [
    "DiagramRenderer",
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonPlanExporter",
    "PlanSummaryFormatter",
    "SceneStlExporter",
    "StlMeshBuilder",
    "StlSceneExporter",
    "SvgExporter",
]
