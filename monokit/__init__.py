"""
monokit

Tooling for Go + pnpm monorepos: keeps go.work in sync with the workspace
configuration, scaffolds new apps and packages, and deploys apps with
Docker Compose.
"""

__version__ = "0.1.0"

from monokit.core.manifest import generate_go_work, sync_workspace
from monokit.scaffolding import scaffold

__all__ = [
    "generate_go_work",
    "scaffold",
    "sync_workspace",
]
