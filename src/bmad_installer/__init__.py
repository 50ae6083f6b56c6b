"""bmad-installer — command-line front end for the BMAD Method installer.

Parses commands, gathers install options interactively when needed, and
delegates every operation to the external installer collaborator.
"""

from bmad_installer.version import __version__

__all__: list[str] = ["__version__"]
