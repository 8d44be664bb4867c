"""test_logger_factory.py
Test LoggerFactory helpers.
"""
import os
import uuid

import pytest

from resume_portfolio.logging import LoggerFactory, running_under_pytest


def test_running_under_pytest():
    assert running_under_pytest() is True


@pytest.mark.parametrize("logger_type", ["default", "pytest", "analyzer", "extractor"])
def test_log_folder_under_pytest(tmp_path, logger_type):
    factory = LoggerFactory(env="development", base_log_folder=str(tmp_path))
    assert factory._get_log_folder_for_type(logger_type) == os.path.join(str(tmp_path), "tests")


def test_existing_logger_is_reused(tmp_path):
    factory = LoggerFactory(env="development", base_log_folder=str(tmp_path))
    name = f"reuse_{uuid.uuid4().hex[:8]}"
    assert factory.get_logger(name=name) is factory.get_logger(name=name)
