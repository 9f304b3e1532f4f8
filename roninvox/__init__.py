"""Voxel chunk meshing, a fly-through camera and the frame logic of a voxel sandbox."""

__version__ = "0.1.0"

__all__ = ["camera", "chunk", "layer", "renderer", "sandbox", "timestep", "voxel"]