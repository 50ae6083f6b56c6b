"""Version of the bmad-installer command-line front end itself.

The version reported by ``bmad --version`` comes from the resolved
installer manifest instead; see :mod:`bmad_installer.infra.resolver`.
"""

from __future__ import annotations

__version__: str = "1.0.0"
