"""Math, cameras, tone mapping and pass planning for a real-time 3D renderer."""

__version__ = "0.1.0"