"""Exporter framework for screen plans.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF elevation drawing for CAD software
- json: Validated dimensions, callout texts and scene boxes
- stl: STL room scene for 3D viewing
- svg: SVG elevation drawing

Usage:
    from screenfit.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["svg", "json"], planner_output, project_name="living_room")
"""

from screenfit.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    diagram_for,
    require_snapshot,
    scene_for,
)
from screenfit.infrastructure.exporters.dxf import DxfExporter
from screenfit.infrastructure.exporters.json_plan import JsonPlanExporter
from screenfit.infrastructure.exporters.stl import StlSceneExporter
from screenfit.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonPlanExporter",
    "StlSceneExporter",
    "SvgExporter",
    "diagram_for",
    "require_snapshot",
    "scene_for",
]
