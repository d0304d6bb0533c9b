"""Host scene graph interfaces and in-memory primitives."""

from seasurface.scene.graph import Mesh, PhongMaterial, PlaneGeometry, Scene
from seasurface.scene.protocols import Disposable, Renderable, SceneContainer

__all__ = [
    "Disposable",
    "Mesh",
    "PhongMaterial",
    "PlaneGeometry",
    "Renderable",
    "Scene",
    "SceneContainer",
]
