"""Hash utilities for mini-git."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def fingerprint(filename: str, content: bytes) -> str:
    """
    Compute the blob id of a file.
    
    The id covers the logical filename as well as the content, so the
    same bytes stored under two names produce two different ids.
    
    Args:
        filename: Path relative to the working tree, '/'-separated
        content: Raw file content
        
    Returns:
        40-character hex string
    """
    return hash_object(filename.encode('utf-8') + content)


def fingerprint_file(filename: str, filepath) -> str:
    """
    Compute the blob id of a file on disk.
    
    Args:
        filename: Logical filename used in the id
        filepath: Path to read the content from
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return fingerprint(filename, f.read())
