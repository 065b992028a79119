"""2D transforms, cameras, a frame timer, input state and a recorded solar system scene."""

__version__ = "0.1.0"

__all__ = ["camera", "inputmanager", "mathhelper", "scene", "timer", "tmhelper", "transform"]