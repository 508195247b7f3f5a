import os
import stat


class SymlinkError(Exception):
    """Base class for failures to determine a symlink's target."""


class NotASymlinkError(SymlinkError):
    pass


class ReadError(SymlinkError):
    pass


def is_symlink(path: str) -> bool:
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def resolve_target(path: str, absolute: bool = True) -> str:
    """Return the current target of the symlink at ``path``.

    With ``absolute`` (the default) a relative target is joined to the
    directory holding the symlink and normalized, so the result is always an
    absolute path. With ``absolute=False`` the stored target is returned
    exactly as read.

    Raises NotASymlinkError when the path is missing, inaccessible or not a
    symlink, and ReadError when the target cannot be read or normalized.
    """
    if not is_symlink(path):
        raise NotASymlinkError(f"[{path}] is not a symlink")

    try:
        target = os.readlink(path)
    except OSError as e:
        raise ReadError(f"Failed to read target of [{path}]: {e}") from e

    if not absolute or os.path.isabs(target):
        return target

    # Relative targets are relative to the symlink's own directory
    try:
        symlink_dir = os.path.dirname(os.path.abspath(path))
    except OSError as e:
        raise ReadError(f"Failed to resolve absolute path for [{path}]") from e
    try:
        return os.path.abspath(os.path.join(symlink_dir, target))
    except (OSError, ValueError) as e:
        raise ReadError(
            f"Failed to resolve absolute path to symlink target [{target}] relative to [{symlink_dir}]"
        ) from e
