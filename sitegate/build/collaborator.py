"""Build collaborator port and its GitHub Actions adapter.

A collaborator receives a :class:`BuildInvocation` and hands it to whatever
actually runs the site builder. In a workflow, the decision step writes
step outputs that later jobs use in their ``if:`` conditions.

Usage
-----
>>> from pathlib import Path
>>> from sitegate.build.collaborator import BuildCollaborator
>>> isinstance(GitHubOutputCollaborator(Path("out.txt")), BuildCollaborator)
True

"""

from __future__ import annotations

import typing as typ

from sitegate.logging import get_logger, log_debug

from .errors import BuildConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .invocation import BuildInvocation

logger = get_logger(__name__)


@typ.runtime_checkable
class BuildCollaborator(typ.Protocol):
    """Protocol for handing an invocation to the external builder."""

    def dispatch(self, invocation: BuildInvocation) -> None:
        """Deliver ``invocation`` to the builder."""
        ...


class GitHubOutputCollaborator:
    """Append an invocation's outputs to the Actions step-output file.

    Parameters
    ----------
    path
        Location named by ``GITHUB_OUTPUT``.

    """

    def __init__(self, path: Path) -> None:
        """Store the output file location."""
        self._path = path

    @property
    def path(self) -> Path:
        """Return the output file location."""
        return self._path

    def dispatch(self, invocation: BuildInvocation) -> None:
        """Write one ``key=value`` line per output.

        Raises
        ------
        BuildConfigError
            If an output value contains a line break.

        """
        outputs = invocation.outputs()
        for key, value in outputs.items():
            if "\n" in value or "\r" in value:
                raise BuildConfigError.multiline_output(key)

        lines = "".join(f"{key}={value}\n" for key, value in outputs.items())
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(lines)
        log_debug(logger, "wrote %d step outputs to %s", len(outputs), self._path)
