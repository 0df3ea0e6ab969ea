"""aitemplates: bootstrap projects with AI coding assistant templates."""

__version__ = "0.1.0"
