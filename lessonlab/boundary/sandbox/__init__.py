"""
Sandbox registry boundary: locates running sandboxes for a session.
"""

from lessonlab.boundary.sandbox.sandbox_client import SandboxClient

__all__ = ["SandboxClient"]
