"""A small 2D game framework: objects, input, sound, textures and levels."""

__version__ = "0.1.0"
__all__ = [
    "geometry",
    "rng",
    "gameobject",
    "objmgr",
    "inputstate",
    "inputcontext",
    "shape",
    "application",
    "rendertools",
    "ball",
    "rect",
    "field",
    "face",
    "sound",
    "framework",
    "texture",
    "levelmgr",
    "game",
]