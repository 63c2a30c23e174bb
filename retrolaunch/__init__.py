"""Game and system lists, process control, entities, animations, textures and value types for a retro game launcher."""

__version__ = "0.1.0"