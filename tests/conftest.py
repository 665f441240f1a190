import pandas as pd
import pytest
from pathlib import Path


@pytest.fixture
def test_assets_dir():
    """Get the path to test assets directory"""
    return Path(__file__).parent / "assets"


@pytest.fixture
def parquet_file(tmp_path):
    """Write a three-row Parquet file with name/age/country columns"""
    df = pd.DataFrame({
        "name": ["John", "Alice", "Bob"],
        "age": [30, 25, 40],
        "country": ["USA", "UK", "Canada"],
    })
    path = tmp_path / "test.parquet"
    df.to_parquet(path, index=False)
    return path


@pytest.fixture
def mixed_types_parquet_file(tmp_path):
    """Write a Parquet file with binary, boolean, float and null values"""
    df = pd.DataFrame({
        "label": ["first", None],
        "payload": [b"ok", b"\xff\xfe"],
        "active": [True, False],
        "score": [1.5, 2.0],
    })
    path = tmp_path / "mixed.parquet"
    df.to_parquet(path, index=False)
    return path
