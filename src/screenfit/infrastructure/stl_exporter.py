"""STL export functionality using numpy-stl."""

from pathlib import Path

import numpy as np
from stl import mesh

from screenfit.domain.value_objects import BoundingBox3D, Scene3D


class StlMeshBuilder:
    """Builds STL meshes from 3D bounding boxes.

    Coordinate System Transformation:
    The domain uses Z-up coordinates (X=width, Y=depth, Z=height). Many STL
    viewers use Y-up coordinates, so vertices are written as:
    - x' = x (width unchanged)
    - y' = z (domain height becomes viewer vertical)
    - z' = y (domain depth becomes viewer depth)
    """

    def build_box_mesh(self, box: BoundingBox3D) -> mesh.Mesh:
        """Create an STL mesh for a single bounding box.

        Args:
            box: The 3D bounding box to convert to a mesh.

        Returns:
            A numpy-stl Mesh object with 12 triangles.
        """
        vertices = np.array([(x, z, y) for x, y, z in box.get_vertices()])
        triangles = box.get_triangles()

        box_mesh = mesh.Mesh(np.zeros(len(triangles), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(triangles):
            box_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]

        return box_mesh

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        """Combine multiple meshes into a single mesh."""
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))

        total_faces = sum(m.vectors.shape[0] for m in meshes)
        combined = mesh.Mesh(np.zeros(total_faces, dtype=mesh.Mesh.dtype))

        offset = 0
        for m in meshes:
            num_faces = m.vectors.shape[0]
            combined.vectors[offset : offset + num_faces] = m.vectors
            offset += num_faces

        return combined


class SceneStlExporter:
    """Exports a Scene3D to STL.

    Every scene object becomes one closed box; the result is a single mesh.
    """

    def __init__(self, mesh_builder: StlMeshBuilder | None = None) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()

    def export(self, scene: Scene3D, categories: set[str] | None = None) -> mesh.Mesh:
        """Build the mesh for a scene.

        Args:
            scene: Scene to export.
            categories: Only export objects in these categories (all if None).

        Returns:
            A numpy-stl Mesh object representing the scene.
        """
        meshes = [
            self.mesh_builder.build_box_mesh(scene_object.box)
            for scene_object in scene.objects
            if categories is None or scene_object.category in categories
        ]
        return self.mesh_builder.combine_meshes(meshes)

    def export_to_file(
        self,
        scene: Scene3D,
        filepath: Path | str,
        categories: set[str] | None = None,
    ) -> None:
        """Export a scene to an STL file."""
        scene_mesh = self.export(scene, categories=categories)
        scene_mesh.save(str(filepath))
