import os
import shutil
import tempfile

import pytest

from string_extensions import runner


@pytest.fixture(scope='function')
def env_dir():
    test_dir = tempfile.mkdtemp()
    yield test_dir
    shutil.rmtree(test_dir)


@pytest.fixture(scope='function')
def env_file(env_dir):
    yield os.path.join(env_dir, '.env')


@pytest.fixture(scope='function', autouse=True)
def clean_environ(monkeypatch):
    for name in ('SUFFIX_CHAR', 'TEST_SUFFIX_CHAR'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runner, 'ENV_PREFIX', '')
    yield
