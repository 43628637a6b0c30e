"""Git ref utilities.

GitHub reports pushes with fully qualified refs such as
``refs/heads/code``. The publish controller works with bare branch names,
so refs should be converted with these helpers rather than by string
slicing at call sites.
"""

from __future__ import annotations

from sitegate.publish.errors import InvalidBranchIdentifierError

BRANCH_REF_PREFIX = "refs/heads/"


def branch_ref(branch: str) -> str:
    """Build a fully qualified ref for ``branch``.

    Examples
    --------
    >>> branch_ref("code")
    'refs/heads/code'

    """
    return f"{BRANCH_REF_PREFIX}{branch}"


def branch_from_ref(ref: str) -> str:
    """Return the branch name named by ``ref``.

    Parameters
    ----------
    ref:
        Either a fully qualified branch ref (``refs/heads/<name>``) or a
        bare branch name, as GitHub sends in ``GITHUB_BASE_REF`` and in
        pull request payloads.

    Returns
    -------
    str
        The bare branch name.

    Raises
    ------
    InvalidBranchIdentifierError
        If ``ref`` is blank, names a tag or pull request, or has an empty
        branch component.

    Examples
    --------
    >>> branch_from_ref("refs/heads/code")
    'code'
    >>> branch_from_ref("feature/x")
    'feature/x'

    """
    if not ref.strip():
        raise InvalidBranchIdentifierError.empty(ref)

    if ref.startswith(BRANCH_REF_PREFIX):
        branch = ref.removeprefix(BRANCH_REF_PREFIX)
        if not branch:
            raise InvalidBranchIdentifierError.empty(ref)
        return branch

    if ref.startswith("refs/"):
        raise InvalidBranchIdentifierError.not_a_branch(ref)

    return ref
