"""Shared pytest fixtures for all tests."""

import json
import logging

import pytest


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample file to act on.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to sample file
    """
    file_path = tmp_path / 'file_1.tmp'
    file_path.write_bytes(b'ABCDEF1234567890')
    return file_path


@pytest.fixture
def multiple_sample_files(tmp_path):
    """
    Create multiple sample files for batch operations.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        List of Paths to sample files
    """
    files = []
    for i in range(3):
        file_path = tmp_path / f'sample_{i}.tmp'
        file_path.write_text(f'Sample content {i}')
        files.append(file_path)
    return files


@pytest.fixture
def sample_directory(tmp_path):
    """
    Create a directory holding two files and one sub-directory.

    Returns:
        Path to the directory
    """
    directory = tmp_path / 'listing'
    directory.mkdir()
    (directory / 'a.txt').write_text('a')
    (directory / 'b.txt').write_text('b')
    (directory / 'nested').mkdir()
    (directory / 'nested' / 'deep.txt').write_text('deep')
    return directory


@pytest.fixture
def action_logger():
    """Logger handed to actions, propagating to caplog."""
    logger = logging.getLogger('tests.actions')
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def make_message():
    """
    Build a JSON job message.

    Returns:
        Callable taking the job id and parameter dicts
    """
    def _make(job_id, *parameters):
        return json.dumps({"job_id": job_id, "parameters": list(parameters)})
    return _make
