import pytest

CATALOG_ENV_VARS = (
    "CATALOG_STORAGE",
    "CATALOG_DATA_DIR",
    "CATALOG_LOG_LEVEL",
    "CATALOG_LOG_FILE",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No CATALOG_* variables and a cwd without a .env file.

    setenv before delenv so monkeypatch also removes anything a loaded
    .env file put into os.environ during the test.
    """
    for var in CATALOG_ENV_VARS:
        monkeypatch.setenv(var, "placeholder")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
