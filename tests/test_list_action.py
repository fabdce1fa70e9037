"""Tests for the list action."""

import logging
import os

import pytest

from worker.actions import ListAction
from worker.exceptions import FileSystemOperationError


def test_list_directory_entries(sample_directory):
    result = ListAction([str(sample_directory)]).execute()

    expected = {
        os.path.join(str(sample_directory), name) for name in ('a.txt', 'b.txt', 'nested')
    }
    assert sorted(result) == sorted(expected)
    assert len(result) == len(expected)


def test_list_is_not_recursive(sample_directory):
    result = ListAction([str(sample_directory)]).execute()

    assert not any(entry.endswith('deep.txt') for entry in result)


def test_list_empty_directory(tmp_path):
    empty = tmp_path / 'empty'
    empty.mkdir()

    assert ListAction([str(empty)]).execute() == []


def test_list_without_sources():
    assert ListAction([]).execute() == []


def test_list_skips_non_directory(sample_file, action_logger, caplog):
    with caplog.at_level(logging.WARNING, logger='tests.actions'):
        result = ListAction([str(sample_file)], logger=action_logger).execute()

    assert result == []
    assert f"{sample_file} is not a directory" in caplog.text


def test_list_concatenates_directories_in_order(tmp_path, sample_file):
    first = tmp_path / 'first'
    first.mkdir()
    (first / 'one.txt').write_text('1')
    second = tmp_path / 'second'
    second.mkdir()
    (second / 'two.txt').write_text('2')
    (second / 'three.txt').write_text('3')

    result = ListAction([str(first), str(sample_file), str(second)]).execute()

    assert result[0] == str(first / 'one.txt')
    assert sorted(result[1:]) == sorted([str(second / 'two.txt'), str(second / 'three.txt')])


def test_list_same_directory_twice_is_not_deduplicated(sample_directory):
    result = ListAction([str(sample_directory), str(sample_directory)]).execute()

    assert len(result) == 6


def test_list_read_error_fails(sample_directory, monkeypatch):
    def failing_scandir(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(os, "scandir", failing_scandir)

    with pytest.raises(FileSystemOperationError) as exc_info:
        ListAction([str(sample_directory)]).execute()

    assert f'Could not list directory "{sample_directory}"' in str(exc_info.value)
    assert "Permission denied" in str(exc_info.value)


def test_list_fails_on_undecodable_entry_name(tmp_path):
    directory = tmp_path / 'raw'
    directory.mkdir()
    try:
        with open(os.path.join(os.fsencode(str(directory)), b'bad-\xff-name'), 'wb'):
            pass
    except OSError:
        pytest.skip("filesystem rejects non UTF-8 file names")

    with pytest.raises(FileSystemOperationError) as exc_info:
        ListAction([str(directory)]).execute()

    assert str(directory) in str(exc_info.value)
