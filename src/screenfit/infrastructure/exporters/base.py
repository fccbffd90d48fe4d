"""Exporter plumbing shared by the plan exporters.

An exporter turns a PlannerOutput into one file. Exporters only ever see
outputs whose dimensions passed the validation gate; the drawing and the
scene are taken from the output when the planner produced them and laid
out on demand otherwise.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from screenfit.domain.services import DiagramLayout, DiagramLayoutEngine, SceneLayoutEngine

if TYPE_CHECKING:
    from screenfit.application.dtos import PlannerOutput
    from screenfit.domain.value_objects import CommittedSnapshot, Scene3D


logger = logging.getLogger(__name__)

ALL_FORMATS = "all"


@runtime_checkable
class Exporter(Protocol):
    """A file format the plan can be written in.

    Attributes:
        format_name: Registry key, also used in output file names.
        file_extension: Extension without the leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: PlannerOutput, path: Path) -> None:
        """Write the plan to ``path``.

        Raises:
            ValueError: If the output has no committed snapshot.
        """
        ...

    def export_string(self, output: PlannerOutput) -> str:
        """Text rendition of the plan, for text formats only."""
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


def require_snapshot(output: PlannerOutput, format_name: str) -> CommittedSnapshot:
    """The committed snapshot an export is built from.

    Raises:
        ValueError: If the dimensions were never validated.
    """
    if output.snapshot is None:
        raise ValueError(
            f"{format_name.upper()} export requires validated dimensions. "
            "Every screen and room dimension must be greater than zero."
        )
    return output.snapshot


def diagram_for(output: PlannerOutput, format_name: str) -> DiagramLayout:
    """The planner's drawing, or a preview drawing of the snapshot."""
    snapshot = require_snapshot(output, format_name)
    if output.diagram is not None:
        return output.diagram
    logger.debug(f"{format_name}: no diagram on output, laying out a preview")
    return DiagramLayoutEngine().layout_snapshot(snapshot)


def scene_for(output: PlannerOutput, format_name: str) -> Scene3D:
    """The planner's 3D scene, or one placed from the snapshot."""
    snapshot = require_snapshot(output, format_name)
    if output.scene is not None:
        return output.scene
    return SceneLayoutEngine().layout(snapshot)


class ExporterRegistry:
    """Exporter classes by format name.

    Exporter modules add themselves at import time with
    ``@ExporterRegistry.register("svg")``.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Any:
        """Class decorator adding an exporter under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Exporter for '{format_name}' replaced by {exporter_class.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {', '.join(cls.available_formats()) or 'none'}"
            ) from None

    @classmethod
    def resolve(cls, formats: list[str]) -> list[str]:
        """Expand "all" and drop repeats, keeping the requested order.

        Raises:
            KeyError: Naming every requested format that is not registered.
        """
        if ALL_FORMATS in formats:
            return cls.available_formats()
        requested = list(dict.fromkeys(formats))
        unknown = [name for name in requested if name not in cls._exporters]
        if unknown:
            raise KeyError(
                f"Unknown formats: {', '.join(unknown)}. "
                f"Available formats: {', '.join(cls.available_formats()) or 'none'}"
            )
        return requested

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        cls._exporters.clear()


class ExportManager:
    """Writes one plan in several formats into a single directory.

    Files are named ``{project_name}_{format}.{extension}``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def filename_for(self, format_name: str, project_name: str = "screen") -> Path:
        extension = ExporterRegistry.get(format_name).file_extension
        return self.output_dir / f"{project_name}_{format_name}.{extension}"

    def export_all(
        self,
        formats: list[str],
        output: PlannerOutput,
        project_name: str = "screen",
        exporter_options: dict[str, dict] | None = None,
    ) -> dict[str, Path]:
        """Export the plan in every requested format.

        Args:
            formats: Format names, possibly including "all".
            output: The planner output to export.
            project_name: Prefix of every file name.
            exporter_options: Constructor keyword arguments per format.

        Returns:
            The written file for each format, in export order.

        Raises:
            KeyError: If a format is not registered. Nothing is written.
            ValueError: If the output has no validated dimensions.
        """
        selected = ExporterRegistry.resolve(formats)
        options = exporter_options or {}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for format_name in selected:
            exporter = ExporterRegistry.get(format_name)(**options.get(format_name, {}))
            target = self.filename_for(format_name, project_name)
            logger.info(f"Writing {format_name} plan to {target}")
            exporter.export(output, target)
            written[format_name] = target
        return written

    def export_single(
        self,
        format_name: str,
        output: PlannerOutput,
        project_name: str = "screen",
    ) -> Path:
        return self.export_all([format_name], output, project_name)[format_name]
