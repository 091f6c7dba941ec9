"""Directory tree enumeration and path mapping between roots."""

import os
from pathlib import Path
from typing import Iterator, Set, Union

PathLike = Union[str, Path]


def _raise(error: OSError) -> None:
    raise error


def iter_files(root: PathLike) -> Iterator[str]:
    """Yield the relative path of every regular file under root.

    Descends all subdirectories with no depth limit. Directories, symlinks
    and special files are not yielded and symlinked directories are not
    followed. Order is unspecified.

    Args:
        root: Directory to enumerate

    Yields:
        Root-relative paths using forward slashes

    Raises:
        OSError: If the root or a subdirectory can't be read, including one
            that disappears during the walk
    """
    root = Path(root)

    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")

    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        for name in filenames:
            full_path = os.path.join(dirpath, name)
            if is_regular_file(full_path):
                yield relative_path(full_path, root)


def is_regular_file(path: PathLike) -> bool:
    """True for a regular file that is not a symlink."""
    return not os.path.islink(path) and os.path.isfile(path)


def list_files(root: PathLike) -> Set[str]:
    """Materialise iter_files() into a set."""
    return set(iter_files(root))


def relative_path(path: PathLike, root: PathLike) -> str:
    """Strip the root prefix from path.

    Args:
        path: File located under root
        root: Root directory

    Returns:
        Relative path with forward slashes, e.g. "a/x.txt"
    """
    return Path(path).relative_to(root).as_posix()


def counterpart(relative: str, other_root: PathLike) -> Path:
    """Path of the same logical file under the other root."""
    return Path(other_root).joinpath(*relative.split("/"))
