"""Shared fixtures building fake block device trees"""

import os

import pytest


def write_attributes(directory, attributes):
    """Create one file per attribute in directory"""
    os.makedirs(directory, exist_ok=True)
    for name, value in attributes.items():
        with open(os.path.join(directory, name), 'w') as f:
            f.write(f"{value}\n")


@pytest.fixture
def sys_block(tmp_path):
    """Empty block device directory"""
    path = tmp_path / "block"
    path.mkdir()
    return path


@pytest.fixture
def make_array(sys_block):
    """Factory creating an md array with block and md/ attributes"""

    def _make(name, attributes=None, md_attributes=None):
        device_dir = sys_block / name
        write_attributes(str(device_dir), attributes or {})
        write_attributes(str(device_dir / "md"), md_attributes or {})
        return device_dir

    return _make


@pytest.fixture
def no_config(tmp_path):
    """Path of a configuration file that does not exist"""
    return str(tmp_path / "missing.conf")
