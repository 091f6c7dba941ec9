"""File digest and content equality utilities.

Equality is decided by comparing full-content digests, so neither file has to
be held in memory. md5 is the default; xxh3-128 is available for speed and
sha256 for when collision resistance matters.
"""

import hashlib
from pathlib import Path
from typing import Union

import xxhash

from folder_mirror.config import HashAlgorithm

# Buffer size for file reading (64KB is good for most filesystems)
BUFFER_SIZE = 65536


def _new_hasher(algorithm: Union[HashAlgorithm, str]):
    if isinstance(algorithm, str):
        try:
            algorithm = HashAlgorithm(algorithm.lower())
        except ValueError:
            raise ValueError(f"Unknown algorithm: {algorithm}") from None

    if algorithm is HashAlgorithm.MD5:
        return hashlib.md5()
    if algorithm is HashAlgorithm.XXH128:
        return xxhash.xxh3_128()
    if algorithm is HashAlgorithm.SHA256:
        return hashlib.sha256()
    raise ValueError(f"Unknown algorithm: {algorithm}")


def hash_file(
    file_path: Path,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.MD5
) -> bytes:
    """Compute the digest of a file's full content.

    Args:
        file_path: Path to the file to hash
        algorithm: Digest algorithm (md5, xxh128 or sha256)

    Returns:
        Raw digest bytes

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file can't be read
        ValueError: If the path is not a file or the algorithm is unknown
    """
    file_path = Path(file_path)
    hasher = _new_hasher(algorithm)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Not a file: {file_path}")

    # Read and hash in chunks
    with open(file_path, "rb") as f:
        while True:
            data = f.read(BUFFER_SIZE)
            if not data:
                break
            hasher.update(data)

    return hasher.digest()


def files_equal(
    first: Path,
    second: Path,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.MD5
) -> bool:
    """Check whether two files have byte-identical content.

    Files of different size are never equal, so the digests are only
    computed when the sizes match.

    Args:
        first: First file
        second: Second file
        algorithm: Digest algorithm used for the comparison

    Returns:
        True if every digest byte matches, False otherwise

    Raises:
        OSError: If either file can't be opened or read completely
    """
    first = Path(first)
    second = Path(second)

    if first.stat().st_size != second.stat().st_size:
        return False

    return hash_file(first, algorithm) == hash_file(second, algorithm)
